"""Precomputed (player, role) eligibility derived from player filters."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from fmteam.models import Player, PlayerFilter


@dataclass(frozen=True)
class EligibilityMatrix:
    """Read-only lookup; pairs never computed default to eligible."""

    table: Mapping[Tuple[str, str], bool]

    @classmethod
    def build(
        cls,
        players: Iterable[Player],
        roles: Iterable[str],
        filters: Iterable[PlayerFilter] = (),
    ) -> "EligibilityMatrix":
        by_player: Dict[str, PlayerFilter] = {}
        for player_filter in filters:
            # First filter for a name wins, matching a linear scan.
            by_player.setdefault(player_filter.player, player_filter)

        distinct_roles = tuple(dict.fromkeys(roles))
        table: Dict[Tuple[str, str], bool] = {}
        for player in players:
            player_filter = by_player.get(player.name)
            for role in distinct_roles:
                table[(player.name, role)] = player_filter is None or player_filter.permits(role)
        return cls(MappingProxyType(table))

    def is_eligible(self, player: str, role: str) -> bool:
        return self.table.get((player, role), True)

    def eligible_roles(self, player: str) -> Tuple[str, ...]:
        return tuple(role for (name, role), allowed in self.table.items() if name == player and allowed)

    def __len__(self) -> int:
        return len(self.table)
