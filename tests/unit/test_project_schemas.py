"""Property-based tests for project input validation using hypothesis."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from src.expovote.models import MAX_PROJECT_NAME_LENGTH
from src.expovote.schemas import ProjectCreate, ProjectTally, Report
from tests.factories import utc_now

pytestmark = pytest.mark.unit

blank = st.text(alphabet=" \t\n\r", max_size=20)
visible_name = st.text(min_size=1, max_size=MAX_PROJECT_NAME_LENGTH).filter(
    lambda s: s.strip() and "\x00" not in s
)


@given(name=blank)
def test_blank_names_rejected(name: str):
    with pytest.raises(ValidationError) as exc_info:
        ProjectCreate(name=name)
    assert any(error["loc"] == ("name",) for error in exc_info.value.errors())


@given(name=visible_name)
@settings(max_examples=100)
def test_names_are_stripped(name: str):
    assert ProjectCreate(name=name).name == name.strip()


def test_name_too_long_rejected():
    with pytest.raises(ValidationError):
        ProjectCreate(name="x" * (MAX_PROJECT_NAME_LENGTH + 1))


def test_surrounding_whitespace_does_not_count_towards_length():
    name = " " + "x" * MAX_PROJECT_NAME_LENGTH + " "
    assert ProjectCreate(name=name).name == "x" * MAX_PROJECT_NAME_LENGTH


def _tally(id: int, votes: int) -> ProjectTally:
    return ProjectTally(id=id, name=f"P{id}", created_at=utc_now(), votes=votes)


def test_report_share_of():
    tallies = [_tally(1, 3), _tally(2, 1)]
    report = Report(tallies=tallies, total_votes=4, leader=tallies[0], generated_at=utc_now())

    assert report.share_of(tallies[0]) == 75.0
    assert report.share_of(tallies[1]) == 25.0
    assert report.project_count == 2


def test_report_share_of_without_votes():
    tallies = [_tally(1, 0)]
    report = Report(tallies=tallies, total_votes=0, leader=None, generated_at=utc_now())

    assert report.share_of(tallies[0]) == 0.0


@pytest.mark.parametrize("name", ["\x00", "Robô\x00", "a\x00b"])
def test_nul_character_rejected(name: str):
    with pytest.raises(ValidationError):
        ProjectCreate(name=name)
