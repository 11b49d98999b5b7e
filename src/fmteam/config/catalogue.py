"""Closed role and ability catalogues plus the player-table column layout."""

from __future__ import annotations

from typing import Dict, Tuple


# Order matters: a role's position here is its rating column offset.
ROLES: Tuple[str, ...] = (
    "W(s) R", "W(s) L", "W(a) R", "W(a) L", "IF(s)", "IF(a)", "AP(s)", "AP(a)", "WTM(s)",
    "WTM(a)", "TQ(a)", "RD(A)", "IW(s)", "IW(a)", "DW(d)", "DW(s)", "WM(d)", "WM(s)", "WM(a)",
    "WP(s)", "WP(a)", "MEZ(s)", "MEZ(a)", "BWM(d)", "BWM(s)", "BBM", "CAR", "CM(d)", "CM(s)",
    "CM(a)", "DLP(d)", "DLP(s)", "RPM", "HB", "DM(d)", "DM(s)", "A", "SV(s)", "SV(a)", "RGA",
    "CD(d)", "CD(s)", "CD(c)", "NCB(d)", "WCB(d)", "WCB(s)", "WCB(a)", "BPD(d)", "BPD(s)",
    "BPD(c)", "L(s)", "L(a)", "FB(d) R", "FB(s) R", "FB(a) R", "FB(d) L", "FB(s) L", "FB(a) L",
    "IFB(d) R", "IFB(d) L", "WB(d) R", "WB(s) R", "WB(a) R", "WB(d) L", "WB(s) L", "WB(a) L",
    "IWB(d) R", "IWB(s) R", "IWB(a) R", "IWB(d) L", "IWB(s) L", "IWB(a) L", "CWB(s) R",
    "CWB(a) R", "CWB(s) L", "CWB(a) L", "PF(d)", "PF(s)", "PF(a)", "TM(s)", "TM(a)", "AF", "P",
    "DLF(s)", "DLF(a)", "CF(s)", "CF(a)", "F9", "SS", "EG", "SK(d)", "SK(s)", "SK(a)", "GK",
)

# Technical, mental, physical, then goalkeeping attributes.
ABILITIES: Tuple[str, ...] = (
    "Cor", "Cro", "Dri", "Fin", "Fir", "Fre", "Hea", "Lon", "L Th", "Mar", "Pas", "Pen", "Tck",
    "Tec", "Agg", "Ant", "Bra", "Cmp", "Cnt", "Dec", "Det", "Fla", "Ldr", "OtB", "Pos", "Tea",
    "Vis", "Wor", "Acc", "Agi", "Bal", "Jum", "Nat", "Pac", "Sta", "Str", "Aer", "Cmd", "Com",
    "Ecc", "Han", "Kic", "1v1", "Pun", "Ref", "Rus", "Thr",
)

# Roles from the older 96-entry list that never got rating columns.
RETIRED_ROLES: Tuple[str, ...] = ("AM(s)", "AM(a)")

REQUIRED_ROLE_COUNT = 11
MIN_PLAYER_COUNT = 11

NAME_COL = 0
AGE_COL = 1
FOOT_COL = 2
ABILITIES_START_COL = 3
DNA_COL = ABILITIES_START_COL + len(ABILITIES)
ROLE_RATINGS_START_COL = DNA_COL + 1
TABLE_WIDTH = ROLE_RATINGS_START_COL + len(ROLES)

ROLE_INDEX: Dict[str, int] = {role: index for index, role in enumerate(ROLES)}
ABILITY_INDEX: Dict[str, int] = {name: index for index, name in enumerate(ABILITIES)}


def is_valid_role(name: str) -> bool:
    """Return True when ``name`` is an exact catalogue entry."""

    return name in ROLE_INDEX


def role_index(name: str) -> int:
    """Return the catalogue offset of ``name``, raising KeyError if unknown."""

    try:
        return ROLE_INDEX[name]
    except KeyError:
        raise KeyError(f"Unknown role {name!r}") from None
