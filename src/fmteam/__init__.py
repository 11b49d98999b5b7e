"""Football Manager starting-eleven selection."""

__version__ = "0.1.0"
