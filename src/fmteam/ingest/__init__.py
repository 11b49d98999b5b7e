"""Input adapters that normalize role files and player tables."""

from .players import load_player_table, parse_player_rows, parse_rating
from .roles import load_role_file, parse_role_file_text

__all__ = [
    "load_player_table",
    "load_role_file",
    "parse_player_rows",
    "parse_rating",
    "parse_role_file_text",
]
