"""REST API for the team selector."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from fmteam.api.schemas import CategoryResponse, SelectRequest, TeamResponse, team_response
from fmteam.config import ROLES, PlayerCategory, roles_for_category
from fmteam.errors import SelectionError, TableError
from fmteam.ingest import parse_player_rows, parse_role_file_text
from fmteam.selection import select_team


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="fm team selector")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/roles")
    async def roles() -> dict[str, list[str]]:
        return {"roles": list(ROLES)}

    @app.get("/categories", response_model=list[CategoryResponse])
    async def categories() -> list[CategoryResponse]:
        return [
            CategoryResponse(
                category=category.value,
                roles=[role for role in ROLES if role in roles_for_category(category)],
            )
            for category in PlayerCategory
        ]

    @app.post("/select", response_model=TeamResponse)
    async def select(request: SelectRequest) -> TeamResponse:
        try:
            content = parse_role_file_text(request.role_file)
            players = parse_player_rows(request.rows)
            team = select_team(players, content.roles, content.filters)
        except (SelectionError, TableError) as exc:
            logger.warning("Team selection request rejected: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return team_response(team)

    return app
