"""Attendee-facing voting pages and the QR codes that lead to them."""

from fastapi import APIRouter, Request
from starlette.responses import Response

from src.expovote.api.dependencies import (
    ProjectServiceDep,
    PublicBaseUrl,
    VoterId,
    VotingServiceDep,
)
from src.expovote.api.routes.params import ProjectIdForm, ProjectIdPath
from src.expovote.core.config import get_settings
from src.expovote.core.exceptions import DuplicateVote
from src.expovote.core.qr import voting_qr_svg
from src.expovote.core.security.rate_limit import limiter, vote_limit
from src.expovote.core.templates import render

router = APIRouter(tags=["voting"])

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("/votar/{project_id}", summary="Voting page")
async def voting_page(
    request: Request, project_id: ProjectIdPath, projects: ProjectServiceDep
) -> Response:
    """Page reached by scanning a project's QR code."""
    project = await projects.get_project(project_id)
    return render(request, "vote.html", {"project": project})


@router.post("/votar", summary="Cast vote")
@limiter.limit(vote_limit)
async def cast_vote(
    request: Request,
    project_id: ProjectIdForm,
    voter_id: VoterId,
    projects: ProjectServiceDep,
    voting: VotingServiceDep,
) -> Response:
    """Record the vote, or explain that this device already voted for the project."""
    try:
        await voting.cast_vote(project_id, voter_id)
    except DuplicateVote:
        project = await projects.get_project(project_id)
        return render(request, "already_voted.html", {"project": project})

    project = await projects.get_project(project_id)
    return render(request, "vote_confirmed.html", {"project": project})


@router.get("/qrcode/{project_id}", summary="Voting QR code")
async def voting_qr_code(project_id: ProjectIdPath, base_url: PublicBaseUrl) -> Response:
    """SVG QR code encoding <base url>/votar/<project id>."""
    svg = voting_qr_svg(base_url, project_id)
    # Payload follows the Host header unless BASE_URL is set
    visibility = "public" if get_settings().base_url else "private"
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": f"{visibility}, max-age=3600"},
    )
