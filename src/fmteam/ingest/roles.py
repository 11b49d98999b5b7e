"""Parse role files: eleven formation slots plus optional per-player filters.

Two layouts are accepted. The legacy layout is eleven bare role lines. The
sectioned layout has a ``[roles]`` section and an optional ``[filters]``
section whose lines read ``PLAYER NAME: cat, cat``. ``#`` starts a comment
anywhere on a line; blank lines are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence

from fmteam.config.catalogue import REQUIRED_ROLE_COUNT, RETIRED_ROLES
from fmteam.config.categories import PlayerCategory, parse_category
from fmteam.errors import SelectionError
from fmteam.models import PlayerFilter, RoleFileContent, validate_player_name, validate_role_name


logger = logging.getLogger(__name__)

ROLES_SECTION = "roles"
FILTERS_SECTION = "filters"


@dataclass(frozen=True)
class SourceLine:
    number: int
    text: str


def _logical_lines(text: str) -> List[SourceLine]:
    lines: List[SourceLine] = []
    for number, raw in enumerate(text.splitlines(), start=1):
        content = raw.split("#", 1)[0].strip()
        if content:
            lines.append(SourceLine(number, content))
    return lines


def _is_section_header(text: str) -> bool:
    return text.startswith("[") and text.endswith("]")


def parse_role_file_text(text: str) -> RoleFileContent:
    """Parse role-file text into roles (order and duplicates kept) and filters."""

    lines = _logical_lines(text)
    if not lines:
        raise SelectionError("Role file is empty or contains no valid lines")

    if not any(_is_section_header(line.text) for line in lines):
        logger.warning("Role file has no section headers; reading legacy roles-only format")
        return RoleFileContent(roles=_parse_roles(lines), filters=())

    sections: Dict[str, List[SourceLine]] = {ROLES_SECTION: [], FILTERS_SECTION: []}
    seen_roles_header = False
    current: str | None = None
    for line in lines:
        if _is_section_header(line.text):
            name = line.text[1:-1].strip().lower()
            if name not in sections:
                raise SelectionError(f"Unknown section '{line.text}' on line {line.number}")
            seen_roles_header = seen_roles_header or name == ROLES_SECTION
            current = name
            continue
        if current is None:
            raise SelectionError(
                f"Content found outside of section on line {line.number}: {line.text}"
            )
        sections[current].append(line)

    if not seen_roles_header:
        raise SelectionError("No [roles] section found in role file")

    roles = _parse_roles(sections[ROLES_SECTION])
    filters = _parse_filters(sections[FILTERS_SECTION])
    if not filters:
        logger.info("Role file has no player filters")
    return RoleFileContent(roles=roles, filters=filters)


def _parse_roles(lines: Sequence[SourceLine]) -> tuple[str, ...]:
    if len(lines) != REQUIRED_ROLE_COUNT:
        raise SelectionError(
            f"Roles section must contain exactly {REQUIRED_ROLE_COUNT} roles, found {len(lines)}"
        )

    roles: List[str] = []
    for line in lines:
        if line.text in RETIRED_ROLES:
            raise SelectionError(
                f"Invalid role on line {line.number}: '{line.text}' has no rating column"
            )
        try:
            roles.append(validate_role_name(line.text))
        except ValueError:
            raise SelectionError(f"Invalid role on line {line.number}: '{line.text}'") from None
    return tuple(roles)


def _parse_filters(lines: Sequence[SourceLine]) -> tuple[PlayerFilter, ...]:
    filters: List[PlayerFilter] = []
    seen_players: set[str] = set()

    for line in lines:
        if ":" not in line.text:
            raise SelectionError(
                f"Invalid filter format on line {line.number}: '{line.text}'. "
                "Expected 'PLAYER_NAME: CATEGORY_LIST'"
            )
        raw_name, raw_categories = line.text.split(":", 1)

        if not raw_name.strip():
            raise SelectionError(f"Empty player name on line {line.number}")
        try:
            player = validate_player_name(raw_name)
        except ValueError as exc:
            raise SelectionError(f"Invalid player name on line {line.number}: {exc}") from None

        if player in seen_players:
            raise SelectionError(f"Duplicate player filter for '{player}' on line {line.number}")
        seen_players.add(player)

        categories: List[PlayerCategory] = []
        for token in raw_categories.split(","):
            if not token.strip():
                continue
            try:
                category = parse_category(token)
            except SelectionError as exc:
                raise SelectionError(
                    f"Invalid category '{token.strip()}' for player '{player}' "
                    f"on line {line.number}: {exc.message}"
                ) from None
            if category not in categories:
                categories.append(category)

        if not categories:
            raise SelectionError(
                f"No valid categories specified for player '{player}' on line {line.number}"
            )
        filters.append(PlayerFilter(player=player, allowed=tuple(categories)))

    return tuple(filters)


def load_role_file(path: Path) -> RoleFileContent:
    """Read a UTF-8 role file from disk and parse it."""

    try:
        text = Path(path).expanduser().read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise SelectionError(f"Failed to read role file {path}: {exc}") from exc
    content = parse_role_file_text(text)
    logger.info(
        "Loaded %d roles and %d player filters from %s",
        len(content.roles),
        len(content.filters),
        path,
    )
    logger.debug("Roles: %s", list(content.roles))
    logger.debug("Filters: %s", [f"{f.player}: {', '.join(map(str, f.allowed))}" for f in content.filters])
    return content
