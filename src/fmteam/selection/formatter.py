"""Plain-text rendering of a selected team."""

from __future__ import annotations

from fmteam.selection.team import Team


def format_team_output(team: Team) -> str:
    """One ``ROLE -> NAME (score: S)`` line per assignment, sorted by role, then the total."""

    lines = [
        f"{assignment.role} -> {assignment.player.name} (score: {assignment.score:.1f})"
        for assignment in team.sorted_by_role()
    ]
    lines.append(f"Total Score: {team.total_score:.1f}")
    return "\n".join(lines) + "\n"


def format_assignment_summary(team: Team) -> str:
    return f"Team of {len(team)} players with total score: {team.total_score:.1f}"
