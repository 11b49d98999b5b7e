"""Parsed role-file content: the ordered formation and per-player filters."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from fmteam.config.categories import PlayerCategory, role_in_category
from fmteam.models.player import PlayerName, RoleName


class PlayerFilter(BaseModel):
    """Restrict ``player`` to roles belonging to at least one allowed category."""

    player: PlayerName
    allowed: Tuple[PlayerCategory, ...] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def permits(self, role: str) -> bool:
        return any(role_in_category(role, category) for category in self.allowed)


class RoleFileContent(BaseModel):
    roles: Tuple[RoleName, ...]
    filters: Tuple[PlayerFilter, ...] = ()

    model_config = ConfigDict(frozen=True)
