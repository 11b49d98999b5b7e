"""Player categories and the static category-to-role membership table."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Tuple

from fmteam.errors import SelectionError


class PlayerCategory(str, Enum):
    """Coarse positional tags usable in ``[filters]`` lines."""

    GOAL = "goal"
    CENTRAL_DEFENDER = "cd"
    WING_BACK = "wb"
    DEFENSIVE_MIDFIELDER = "dm"
    CENTRAL_MIDFIELDER = "cm"
    WINGER = "wing"
    ATTACKING_MIDFIELDER = "am"
    PLAYMAKER = "pm"
    STRIKER = "str"

    def __str__(self) -> str:
        return self.value


_CATEGORY_ROLES: Dict[PlayerCategory, FrozenSet[str]] = {
    PlayerCategory.GOAL: frozenset({"GK", "SK(d)", "SK(s)", "SK(a)"}),
    PlayerCategory.CENTRAL_DEFENDER: frozenset({
        "CD(d)", "CD(s)", "CD(c)", "BPD(d)", "BPD(s)", "BPD(c)", "NCB(d)",
        "WCB(d)", "WCB(s)", "WCB(a)", "L(s)", "L(a)",
    }),
    PlayerCategory.WING_BACK: frozenset({
        "FB(d) R", "FB(s) R", "FB(a) R", "FB(d) L", "FB(s) L", "FB(a) L",
        "WB(d) R", "WB(s) R", "WB(a) R", "WB(d) L", "WB(s) L", "WB(a) L",
        "IFB(d) R", "IFB(d) L",
        "IWB(d) R", "IWB(s) R", "IWB(a) R", "IWB(d) L", "IWB(s) L", "IWB(a) L",
        "CWB(s) R", "CWB(a) R", "CWB(s) L", "CWB(a) L",
    }),
    PlayerCategory.DEFENSIVE_MIDFIELDER: frozenset({
        "DM(d)", "DM(s)", "HB", "BWM(d)", "BWM(s)", "A", "CM(d)", "DLP(d)", "BBM",
        "SV(s)", "SV(a)",
    }),
    PlayerCategory.CENTRAL_MIDFIELDER: frozenset({
        "CM(d)", "CM(s)", "CM(a)", "DLP(d)", "DLP(s)", "RPM", "BBM", "CAR",
        "MEZ(s)", "MEZ(a)",
    }),
    PlayerCategory.WINGER: frozenset({
        "WM(d)", "WM(s)", "WM(a)", "WP(s)", "WP(a)", "W(s) R", "W(s) L", "W(a) R", "W(a) L",
        "IF(s)", "IF(a)", "IW(s)", "IW(a)", "WTM(s)", "WTM(a)", "TQ(a)", "RD(A)",
        "DW(d)", "DW(s)",
    }),
    PlayerCategory.ATTACKING_MIDFIELDER: frozenset({
        "SS", "EG", "AP(s)", "AP(a)", "CM(a)", "MEZ(a)", "IW(s)", "IW(a)",
    }),
    PlayerCategory.PLAYMAKER: frozenset({
        "DLP(d)", "DLP(s)", "AP(s)", "AP(a)", "WP(s)", "WP(a)", "RGA", "RPM",
    }),
    PlayerCategory.STRIKER: frozenset({
        "AF", "P", "DLF(s)", "DLF(a)", "CF(s)", "CF(a)", "F9", "TM(s)", "TM(a)",
        "PF(d)", "PF(s)", "PF(a)", "IF(s)", "IF(a)",
    }),
}


def roles_for_category(category: PlayerCategory) -> FrozenSet[str]:
    """Return every catalogue role that belongs to ``category``."""

    return _CATEGORY_ROLES[category]


def role_in_category(role: str, category: PlayerCategory) -> bool:
    """Pure membership test: does ``role`` belong to ``category``?"""

    return role in _CATEGORY_ROLES[category]


def categories_for_role(role: str) -> Tuple[PlayerCategory, ...]:
    return tuple(category for category in PlayerCategory if role in _CATEGORY_ROLES[category])


def parse_category(text: str) -> PlayerCategory:
    """Resolve a short category tag (case-insensitive) to a ``PlayerCategory``."""

    key = text.strip().lower()
    try:
        return PlayerCategory(key)
    except ValueError:
        valid = ", ".join(category.value for category in PlayerCategory)
        raise SelectionError(
            f"Invalid category '{text.strip()}'. Valid categories: {valid}"
        ) from None
