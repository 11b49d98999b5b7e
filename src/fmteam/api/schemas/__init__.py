"""Pydantic models for API I/O."""

from .team import (
    AssignmentResponse,
    CategoryResponse,
    SelectRequest,
    TeamResponse,
    team_response,
)

__all__ = [
    "AssignmentResponse",
    "CategoryResponse",
    "SelectRequest",
    "TeamResponse",
    "team_response",
]
