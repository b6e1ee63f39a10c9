"""Unit tests for `kite.adapters.team_selector.InteractiveTeamSelector`."""

import io

import pytest

from kite.adapters.team_selector import InteractiveTeamSelector
from kite.domain.errors import SelectionError
from kite.interfaces.user_directory import Team
from tests.unit.fakes import FakeDirectory

TEAMS = (Team("PTEAM1", "SRE Platform"), Team("PTEAM2", "Databases"))


def select(answer: str, teams=TEAMS):
    """Run the selector against *teams*, answering with *answer*."""
    stdout = io.StringIO()
    result = InteractiveTeamSelector(stdout=stdout).select_team(
        FakeDirectory(teams=teams), io.StringIO(answer)
    )
    return result, stdout.getvalue()


def test_lists_teams_and_returns_choice():
    """The menu is numbered from 1 and the chosen pair is returned."""
    result, output = select("2\n")
    assert result == ("PTEAM2", "Databases")
    assert "  1) SRE Platform" in output
    assert "  2) Databases" in output
    assert output.endswith("Team [1-2]: ")


def test_surrounding_whitespace_is_ignored():
    """Answers are stripped before parsing."""
    result, _ = select("  1  \n")
    assert result == ("PTEAM1", "SRE Platform")


def test_last_line_without_newline_is_accepted():
    """A final unterminated answer still counts."""
    result, _ = select("1")
    assert result == ("PTEAM1", "SRE Platform")


@pytest.mark.parametrize(
    ("answer", "message"),
    [
        ("", "end of input"),
        ("two\n", "Invalid team choice 'two'"),
        ("0\n", "out of range"),
        ("3\n", "out of range"),
    ],
)
def test_bad_answers_raise_selection_error(answer, message):
    """One attempt only: anything but a listed number fails."""
    with pytest.raises(SelectionError, match=message):
        select(answer)


def test_no_teams_raises_selection_error():
    """A user without teams cannot pick a default team."""
    with pytest.raises(SelectionError, match="No teams found"):
        select("1\n", teams=())
