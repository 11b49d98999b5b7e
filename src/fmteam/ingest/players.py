"""Turn raw player tables (rows of strings) into typed ``Player`` records."""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from fmteam.config.catalogue import (
    ABILITIES,
    ABILITIES_START_COL,
    AGE_COL,
    DNA_COL,
    FOOT_COL,
    NAME_COL,
    ROLE_RATINGS_START_COL,
    ROLES,
)
from fmteam.errors import TableError
from fmteam.models import Footedness, Player, to_single, validate_player_name


logger = logging.getLogger(__name__)

MISSING_MARKERS = frozenset({"", "--"})
HEADER_NAMES = frozenset({"name", "player"})


def _cell(row: Sequence[str], index: int) -> str:
    if index < len(row):
        value = row[index]
        return value.strip() if value is not None else ""
    return ""


def parse_rating(text: str) -> Optional[float]:
    """Parse an ability or rating cell at single precision.

    Blanks, ``--``, junk and negative or out-of-range values become ``None``.
    """

    value = text.strip()
    if value in MISSING_MARKERS:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number) or number < 0:
        return None
    try:
        return to_single(number)
    except OverflowError:
        return None


def _parse_age(text: str, row_number: int, name: str) -> int:
    try:
        age = int(text)
    except ValueError:
        logger.warning("Row %d (%s): invalid age %r, using 0", row_number, name, text)
        return 0
    if not 0 <= age <= 255:
        logger.warning("Row %d (%s): age %d out of range, using 0", row_number, name, age)
        return 0
    return age


def _parse_footedness(text: str, row_number: int, name: str) -> Footedness:
    try:
        return Footedness.parse(text)
    except ValueError:
        logger.warning("Row %d (%s): unknown footedness %r, using R", row_number, name, text)
        return Footedness.RIGHT


def parse_player_rows(rows: Sequence[Sequence[str]]) -> List[Player]:
    """Build players from sheet rows laid out name, age, foot, abilities, DNA, ratings.

    Rows with a blank name are skipped silently; rows whose name is not a
    valid player name are skipped with a warning. Short rows read as blanks.
    """

    players: List[Player] = []
    for row_number, row in enumerate(rows, start=1):
        raw_name = _cell(row, NAME_COL)
        if not raw_name:
            continue
        try:
            name = validate_player_name(raw_name)
        except ValueError as exc:
            logger.warning("Row %d: skipping %r: %s", row_number, raw_name, exc)
            continue

        abilities = tuple(
            parse_rating(_cell(row, ABILITIES_START_COL + offset)) for offset in range(len(ABILITIES))
        )
        role_ratings = tuple(
            parse_rating(_cell(row, ROLE_RATINGS_START_COL + offset)) for offset in range(len(ROLES))
        )

        try:
            player = Player(
                name=name,
                age=_parse_age(_cell(row, AGE_COL), row_number, name),
                footedness=_parse_footedness(_cell(row, FOOT_COL), row_number, name),
                abilities=abilities,
                dna=parse_rating(_cell(row, DNA_COL)),
                role_ratings=role_ratings,
            )
        except TableError as exc:
            raise TableError(f"Player creation failed on row {row_number}: {exc.message}") from exc
        except ValidationError as exc:
            raise TableError(f"Player creation failed on row {row_number}: {exc}") from exc
        players.append(player)

    logger.info("Parsed %d players from %d rows", len(players), len(rows))
    return players


def load_player_table(path: Path) -> List[List[str]]:
    """Read a CSV export of the player sheet; a leading ``Name`` header row is dropped."""

    try:
        with Path(path).expanduser().open(newline="", encoding="utf-8-sig") as f:
            rows = [list(row) for row in csv.reader(f)]
    except (OSError, UnicodeDecodeError) as exc:
        raise TableError(f"Failed to read player table {path}: {exc}") from exc
    except csv.Error as exc:
        raise TableError(f"Malformed CSV in player table {path}: {exc}") from exc

    if rows and rows[0] and rows[0][0].strip().lower() in HEADER_NAMES:
        rows = rows[1:]
    return rows
