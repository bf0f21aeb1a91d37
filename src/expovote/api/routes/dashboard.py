"""Organizer dashboard: live tallies, registration and cleanup actions."""

from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from src.expovote.api.dependencies import ProjectServiceDep, ReportServiceDep, VotingServiceDep
from src.expovote.api.routes.params import ProjectIdPath
from src.expovote.core.security.rate_limit import limiter, register_limit
from src.expovote.core.templates import render
from src.expovote.models import ResultOrder

router = APIRouter(tags=["dashboard"])


def _back_to_dashboard() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", summary="Dashboard")
async def dashboard(request: Request, reports: ReportServiceDep) -> Response:
    """List projects with their vote counts, most voted first."""
    tallies = await reports.aggregate_results(ResultOrder.VOTES)
    return render(
        request,
        "dashboard.html",
        {"tallies": tallies, "total_votes": sum(t.votes for t in tallies)},
    )


@router.post("/cadastrar", summary="Register project")
@limiter.limit(register_limit)
async def register_project(
    request: Request,
    projects: ProjectServiceDep,
    name: Annotated[str, Form()] = "",
) -> Response:
    """Register a project from the dashboard form, then go back to the dashboard."""
    await projects.register(name)
    return _back_to_dashboard()


@router.post("/excluir/{project_id}", summary="Delete project")
async def delete_project(project_id: ProjectIdPath, projects: ProjectServiceDep) -> Response:
    """Delete a project together with all of its votes."""
    await projects.delete(project_id)
    return _back_to_dashboard()


@router.post("/limpar-votos", summary="Clear all votes")
async def clear_votes(voting: VotingServiceDep) -> Response:
    await voting.clear_votes()
    return _back_to_dashboard()
