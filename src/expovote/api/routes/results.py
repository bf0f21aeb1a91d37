"""Results, final report and printable QR cards."""

from fastapi import APIRouter, Request
from starlette.responses import Response

from src.expovote.api.dependencies import ProjectServiceDep, PublicBaseUrl, ReportServiceDep
from src.expovote.api.routes.params import ProjectIdPath
from src.expovote.core.qr import build_voting_url
from src.expovote.core.templates import render
from src.expovote.models import ResultOrder

router = APIRouter(tags=["results"])


@router.get("/resultados/{project_id}", summary="Project results")
async def project_results(
    request: Request, project_id: ProjectIdPath, projects: ProjectServiceDep
) -> Response:
    project = await projects.get_project(project_id)
    votes = await projects.count_votes(project_id)
    return render(request, "results.html", {"project": project, "votes": votes})


@router.get("/relatorio", summary="Final report")
async def final_report(request: Request, reports: ReportServiceDep) -> Response:
    """Ranking of all projects with totals and the current leader."""
    report = await reports.build_report()
    return render(request, "report.html", {"report": report})


@router.get("/imprimir", summary="Print selection")
async def print_selection(request: Request, reports: ReportServiceDep) -> Response:
    tallies = await reports.aggregate_results(ResultOrder.NAME)
    return render(request, "print_list.html", {"tallies": tallies})


@router.get("/imprimir/{project_id}", summary="Printable QR card")
async def print_project(
    request: Request,
    project_id: ProjectIdPath,
    projects: ProjectServiceDep,
    base_url: PublicBaseUrl,
) -> Response:
    project = await projects.get_project(project_id)
    return render(
        request,
        "print_project.html",
        {"project": project, "voting_url": build_voting_url(base_url, project_id)},
    )
