"""Tests for tallies and the final report."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.expovote.models import ResultOrder
from src.expovote.services import ProjectService, ReportService
from tests.helpers import create_project, create_votes

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def seed(session: AsyncSession, votes_by_name: dict[str, int]) -> None:
    for name, votes in votes_by_name.items():
        project = await create_project(session, name=name)
        await create_votes(session, project, votes)


async def test_aggregate_by_votes(db_session: AsyncSession, report_service: ReportService):
    await seed(db_session, {"Estufa": 2, "Robô": 5, "Drone": 0, "Aquário": 2})

    tallies = await report_service.aggregate_results(ResultOrder.VOTES)

    # Count descending, ties alphabetical
    assert [(t.name, t.votes) for t in tallies] == [
        ("Robô", 5),
        ("Aquário", 2),
        ("Estufa", 2),
        ("Drone", 0),
    ]


async def test_aggregate_by_name(db_session: AsyncSession, report_service: ReportService):
    await seed(db_session, {"Estufa": 2, "Robô": 5, "Drone": 0})

    tallies = await report_service.aggregate_results(ResultOrder.NAME)

    assert [t.name for t in tallies] == ["Drone", "Estufa", "Robô"]


async def test_zero_vote_projects_included(db_session: AsyncSession, report_service: ReportService):
    await seed(db_session, {"Sem votos": 0})

    tallies = await report_service.aggregate_results()

    assert len(tallies) == 1
    assert tallies[0].votes == 0


async def test_tallies_match_individual_counts(
    db_session: AsyncSession, report_service: ReportService, project_service: ProjectService
):
    await seed(db_session, {"A": 3, "B": 1, "C": 0})

    for tally in await report_service.aggregate_results():
        assert tally.votes == await project_service.count_votes(tally.id)


async def test_report_totals_and_leader(db_session: AsyncSession, report_service: ReportService):
    await seed(db_session, {"Estufa": 2, "Robô": 5, "Drone": 0})

    report = await report_service.build_report()

    assert report.total_votes == 7
    assert report.total_votes == sum(t.votes for t in report.tallies)
    assert report.leader is not None
    assert report.leader.name == "Robô"
    assert report.leader.votes == max(t.votes for t in report.tallies)
    assert report.project_count == 3


async def test_report_leader_tie_resolves_by_name(
    db_session: AsyncSession, report_service: ReportService
):
    await seed(db_session, {"Zebra": 3, "Abelha": 3})

    report = await report_service.build_report()

    assert report.leader is not None
    assert report.leader.name == "Abelha"


async def test_report_without_votes_has_no_leader(
    db_session: AsyncSession, report_service: ReportService
):
    await seed(db_session, {"A": 0, "B": 0})

    report = await report_service.build_report()

    assert report.total_votes == 0
    assert report.leader is None


async def test_report_without_projects(report_service: ReportService):
    report = await report_service.build_report()

    assert report.tallies == []
    assert report.total_votes == 0
    assert report.leader is None
