"""Typed player records, validated identifiers and role-file content."""

from .player import (
    Footedness,
    Player,
    PlayerName,
    RoleName,
    to_single,
    validate_player_name,
    validate_role_name,
)
from .roles import PlayerFilter, RoleFileContent

__all__ = [
    "Footedness",
    "Player",
    "PlayerFilter",
    "PlayerName",
    "RoleFileContent",
    "RoleName",
    "to_single",
    "validate_player_name",
    "validate_role_name",
]
