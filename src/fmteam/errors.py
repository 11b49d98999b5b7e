"""Error kinds raised by the selection pipeline."""

from __future__ import annotations


class FMTeamError(Exception):
    """Base class for hard failures; ``kind`` prefixes the rendered message."""

    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class ConfigError(FMTeamError):
    """Raised when the configuration file or resolved inputs are unusable."""

    kind = "Configuration error"


class SelectionError(FMTeamError):
    """Raised for role-file violations and unsatisfiable engine preconditions."""

    kind = "Selection error"


class TableError(FMTeamError):
    """Raised when a player table cannot be turned into typed players."""

    kind = "Table processing error"
