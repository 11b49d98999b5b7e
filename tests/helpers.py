"""Shared builders for players, sheet rows and role files."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from fmteam.config.catalogue import ABILITIES, ROLES, role_index
from fmteam.models import Footedness, Player


FORMATION: tuple[str, ...] = (
    "GK",
    "CD(d)",
    "CD(s)",
    "FB(d) R",
    "FB(d) L",
    "CM(d)",
    "CM(s)",
    "CM(a)",
    "W(s) R",
    "W(s) L",
    "CF(s)",
)


def make_player(
    name: str,
    *,
    default: Optional[float] = None,
    ratings: Mapping[str, Optional[float]] | None = None,
    age: int = 25,
    footedness: Footedness = Footedness.RIGHT,
) -> Player:
    values: list[Optional[float]] = [default] * len(ROLES)
    for role, value in (ratings or {}).items():
        values[role_index(role)] = value
    return Player(
        name=name,
        age=age,
        footedness=footedness,
        abilities=tuple(10.0 for _ in ABILITIES),
        dna=None,
        role_ratings=tuple(values),
    )


def make_pool(count: int, *, default: Optional[float] = 8.0, prefix: str = "Player") -> list[Player]:
    return [make_player(f"{prefix} {i}", default=default) for i in range(count)]


def make_row(
    name: str,
    *,
    age: str = "25",
    foot: str = "R",
    ability: str = "10",
    dna: str = "",
    default: str = "",
    ratings: Mapping[str, str] | None = None,
) -> list[str]:
    cells = [default] * len(ROLES)
    for role, value in (ratings or {}).items():
        cells[role_index(role)] = value
    return [name, age, foot, *([ability] * len(ABILITIES)), dna, *cells]


def role_file_text(roles: Sequence[str] = FORMATION, filters: Sequence[str] = ()) -> str:
    lines = ["[roles]", *roles]
    if filters:
        lines += ["", "[filters]", *filters]
    return "\n".join(lines) + "\n"
