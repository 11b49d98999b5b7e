"""Greedy, slot-ordered team selection.

Slots are filled in the order the role file lists them. Each slot takes the
highest-rated eligible player still available; ties go to the player that
appears first in the pool. A slot with no eligible player is left empty and
reported, so the returned team can be shorter than eleven. This is a greedy
strategy, not an optimal assignment solver: an earlier slot may take a player
a later slot needed more.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from fmteam.config.catalogue import MIN_PLAYER_COUNT, REQUIRED_ROLE_COUNT, is_valid_role
from fmteam.errors import SelectionError
from fmteam.models import Player, PlayerFilter
from fmteam.selection.eligibility import EligibilityMatrix
from fmteam.selection.team import Assignment, Team


logger = logging.getLogger(__name__)


def _check_inputs(players: Sequence[Player], roles: Sequence[str]) -> None:
    if len(roles) != REQUIRED_ROLE_COUNT:
        raise SelectionError(
            f"Must have exactly {REQUIRED_ROLE_COUNT} roles for team selection, got {len(roles)}"
        )
    for slot, role in enumerate(roles, start=1):
        if not is_valid_role(role):
            raise SelectionError(f"Invalid role in slot {slot}: {role!r}")

    if len(players) < MIN_PLAYER_COUNT:
        raise SelectionError(
            f"Need at least {MIN_PLAYER_COUNT} players for team selection, got {len(players)}"
        )

    seen: set[str] = set()
    for player in players:
        if player.name in seen:
            raise SelectionError(
                f"Duplicate player '{player.name}' in player pool; filters are keyed by name, "
                "so rename one of the rows"
            )
        seen.add(player.name)


def _best_candidate(available: Sequence[Player], role: str, matrix: EligibilityMatrix) -> Optional[int]:
    best_index: Optional[int] = None
    best_score = float("-inf")
    for index, player in enumerate(available):
        if not matrix.is_eligible(player.name, role):
            continue
        score = player.role_rating(role)
        # Strictly greater keeps the earliest player on ties.
        if score > best_score:
            best_score = score
            best_index = index
    return best_index


def select_team(
    players: Iterable[Player],
    roles: Sequence[str],
    filters: Iterable[PlayerFilter] = (),
) -> Team:
    """Assign one player per role slot, maximizing each slot's rating in order."""

    pool = list(players)
    roles = list(roles)
    filters = tuple(filters)
    _check_inputs(pool, roles)

    matrix = EligibilityMatrix.build(pool, roles, filters)
    available: List[Player] = pool
    assignments: List[Assignment] = []
    unfilled: List[str] = []

    for slot, role in enumerate(roles, start=1):
        index = _best_candidate(available, role, matrix)
        if index is None:
            logger.warning("No eligible players found for role '%s' (slot %d)", role, slot)
            unfilled.append(role)
            continue
        assignment = Assignment.create(available.pop(index), role)
        logger.debug("Slot %d: %s (score %.1f)", slot, assignment, assignment.score)
        assignments.append(assignment)

    team = Team(tuple(assignments), tuple(unfilled))
    if team.is_complete:
        logger.info("Selected a full team with total score %.1f", team.total_score)
    else:
        logger.warning(
            "Selected a partial team: %d of %d slots filled, total score %.1f",
            len(team),
            len(roles),
            team.total_score,
        )
    return team
