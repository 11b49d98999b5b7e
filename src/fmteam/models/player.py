"""Canonical player model shared by the ingest and selection layers."""

from __future__ import annotations

import math
import struct
from enum import Enum
from typing import Annotated, Optional, Tuple

from pydantic import AfterValidator, BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from fmteam.config.catalogue import ABILITIES, ABILITY_INDEX, ROLE_INDEX, ROLES
from fmteam.errors import SelectionError, TableError


MAX_NAME_LENGTH = 100


class Footedness(str, Enum):
    RIGHT = "R"
    LEFT = "L"
    BOTH = "RL"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Footedness":
        """Accept ``R``/``L``/``RL`` in any case plus the FM export spellings."""

        key = text.strip().lower()
        if key in _FOOTEDNESS_ALIASES:
            return _FOOTEDNESS_ALIASES[key]
        raise ValueError(f"footedness '{text}' must be R, L, or RL")


_FOOTEDNESS_ALIASES = {
    "r": Footedness.RIGHT,
    "right": Footedness.RIGHT,
    "right only": Footedness.RIGHT,
    "l": Footedness.LEFT,
    "left": Footedness.LEFT,
    "left only": Footedness.LEFT,
    "rl": Footedness.BOTH,
    "lr": Footedness.BOTH,
    "either": Footedness.BOTH,
}


def validate_player_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise ValueError("Player name cannot be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise ValueError(f"Player name is too long (maximum {MAX_NAME_LENGTH} characters)")
    if not any(ch.isalpha() for ch in name):
        raise ValueError("Player name must contain at least one letter")
    return name


def validate_role_name(value: str) -> str:
    role = value.strip()
    if not role:
        raise ValueError("Role name cannot be empty")
    if role not in ROLE_INDEX:
        raise ValueError(f"Invalid role: {role}")
    return role


def to_single(value: float) -> float:
    """Round ``value`` to the nearest single-precision float; sheet ratings are f32."""

    return struct.unpack("f", struct.pack("f", value))[0]


def validate_rating(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError(f"Rating must be a finite number, got {value}")
    if value < 0:
        raise ValueError(f"Rating cannot be negative, got {value}")
    try:
        return to_single(value)
    except OverflowError:
        raise ValueError(f"Rating {value} is out of range") from None


PlayerName = Annotated[str, AfterValidator(validate_player_name)]
RoleName = Annotated[str, AfterValidator(validate_role_name)]
Rating = Annotated[float, AfterValidator(validate_rating)]


class Player(BaseModel):
    """A scouted player with per-ability values and per-role ratings.

    Missing sheet cells stay ``None``; callers decide how to score them. Present
    values are finite, non-negative and held at single precision.
    """

    name: PlayerName
    age: int = Field(default=0, ge=0, le=255)
    footedness: Footedness = Footedness.RIGHT
    abilities: Tuple[Optional[Rating], ...]
    dna: Optional[Rating] = None
    role_ratings: Tuple[Optional[Rating], ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_catalogue_lengths(self) -> "Player":
        if len(self.abilities) != len(ABILITIES):
            raise TableError(
                f"Player {self.name} has {len(self.abilities)} abilities, expected {len(ABILITIES)}"
            )
        if len(self.role_ratings) != len(ROLES):
            raise TableError(
                f"Player {self.name} has {len(self.role_ratings)} role ratings, expected {len(ROLES)}"
            )
        return self

    def role_rating(self, role: str) -> float:
        """Rating for ``role`` with an absent cell scored as 0.0."""

        index = ROLE_INDEX.get(role)
        if index is None:
            raise SelectionError(f"Invalid role: {role}")
        value = self.role_ratings[index]
        return 0.0 if value is None else value

    def ability(self, name: str) -> float:
        index = ABILITY_INDEX.get(name)
        if index is None:
            return 0.0
        value = self.abilities[index]
        return 0.0 if value is None else value
