"""Command-line interface for picking a starting eleven."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from fmteam.config_loader import AppConfig, resolve_inputs
from fmteam.errors import FMTeamError
from fmteam.ingest import load_player_table, load_role_file, parse_player_rows
from fmteam.selection import format_assignment_summary, format_team_output, select_team


logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Assign the best available player to each of 11 roles",
        epilog=(
            "The role file lists 11 roles, optionally under a [roles] header followed by "
            "a [filters] section of 'PLAYER: cat, cat' lines "
            "(categories: goal, cd, wb, dm, cm, wing, am, pm, str)."
        ),
    )
    parser.add_argument("role_file", type=Path, nargs="?", default=None, help="Path to the role file")
    parser.add_argument("players", type=Path, nargs="?", default=None, help="Path to the player table CSV")
    parser.add_argument("-c", "--config", type=Path, default=None, help="JSON config file")
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default=None,
        help="Output format (default from config, else text)",
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write the team here instead of stdout")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug)",
    )
    return parser.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def run(args: argparse.Namespace) -> str:
    """Load inputs, select the team and return the rendered output."""

    config = AppConfig.load(args.config) if args.config else AppConfig()
    inputs = resolve_inputs(config, role_file=args.role_file, players_file=args.players)

    content = load_role_file(inputs.role_file)
    rows = load_player_table(inputs.players_file)
    logger.info("Read %d rows from %s", len(rows), inputs.players_file)
    players = parse_player_rows(rows)
    team = select_team(players, content.roles, content.filters)
    logger.info(format_assignment_summary(team))

    output_format = args.format or config.output.format
    if output_format == "json":
        from fmteam.api.schemas import team_response

        return team_response(team).model_dump_json(indent=2) + "\n"
    return format_team_output(team)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    try:
        output = run(args)
    except FMTeamError as exc:
        logger.debug("Team selection failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1

    if args.output:
        try:
            args.output.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"Failed to write {args.output}: {exc}", file=sys.stderr)
            return 1
        print(f"Wrote team to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
