"""Result types produced by the assignment engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from fmteam.config.catalogue import REQUIRED_ROLE_COUNT
from fmteam.errors import SelectionError
from fmteam.models import Player, to_single


@dataclass(frozen=True)
class Assignment:
    player: Player
    role: str
    score: float

    @classmethod
    def create(cls, player: Player, role: str) -> "Assignment":
        """Pair ``player`` with ``role``, scoring it from the player's rating."""

        return cls(player=player, role=role, score=player.role_rating(role))

    def __str__(self) -> str:
        return f"{self.role} -> {self.player.name}"


@dataclass(frozen=True)
class Team:
    """Selected assignments in slot order plus the slots that stayed empty.

    A player appears at most once; a role may appear several times.
    """

    assignments: Tuple[Assignment, ...]
    unfilled_roles: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for assignment in self.assignments:
            name = assignment.player.name
            if name in seen:
                raise SelectionError(f"Player {name} is assigned to multiple roles")
            seen.add(name)

    @property
    def total_score(self) -> float:
        """Sum of scores, accumulated at single precision like the sheet ratings."""

        total = 0.0
        for assignment in self.assignments:
            total = to_single(total + assignment.score)
        return total

    @property
    def is_complete(self) -> bool:
        return len(self.assignments) == REQUIRED_ROLE_COUNT

    @property
    def player_names(self) -> Tuple[str, ...]:
        return tuple(assignment.player.name for assignment in self.assignments)

    def roles_count(self, role: str) -> int:
        return sum(1 for assignment in self.assignments if assignment.role == role)

    def sorted_by_role(self) -> List[Assignment]:
        return sorted(self.assignments, key=lambda assignment: assignment.role)

    def sorted_by_score(self) -> List[Assignment]:
        return sorted(self.assignments, key=lambda assignment: assignment.score, reverse=True)

    def __len__(self) -> int:
        return len(self.assignments)
