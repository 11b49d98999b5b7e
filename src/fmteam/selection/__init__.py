"""Team selection: eligibility, greedy assignment and output formatting."""

from .eligibility import EligibilityMatrix
from .formatter import format_assignment_summary, format_team_output
from .service import select_team
from .team import Assignment, Team

__all__ = [
    "Assignment",
    "EligibilityMatrix",
    "Team",
    "format_assignment_summary",
    "format_team_output",
    "select_team",
]
