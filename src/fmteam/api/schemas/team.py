from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from fmteam.selection import Team, format_team_output


class SelectRequest(BaseModel):
    role_file: str = Field(..., min_length=1)
    rows: List[List[str]] = Field(default_factory=list)


class AssignmentResponse(BaseModel):
    role: str
    player: str
    score: float
    age: int
    footedness: str


class TeamResponse(BaseModel):
    assignments: List[AssignmentResponse]
    total_score: float
    complete: bool
    unfilled_roles: List[str]
    text: str


class CategoryResponse(BaseModel):
    category: str
    roles: List[str]


def team_response(team: Team) -> TeamResponse:
    """Serialize a team; assignments stay in slot order, ``text`` is the sorted rendering."""

    return TeamResponse(
        assignments=[
            AssignmentResponse(
                role=assignment.role,
                player=assignment.player.name,
                score=assignment.score,
                age=assignment.player.age,
                footedness=str(assignment.player.footedness),
            )
            for assignment in team.assignments
        ],
        total_score=team.total_score,
        complete=team.is_complete,
        unfilled_roles=list(team.unfilled_roles),
        text=format_team_output(team),
    )
