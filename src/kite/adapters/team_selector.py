"""Interactive team picker.

Lists the current user's teams as a numbered menu and reads the choice from a
text stream. One attempt only: an invalid answer raises `SelectionError`.
"""

from typing import TextIO

import click

from kite.domain.errors import SelectionError
from kite.interfaces.team_selector import TeamSelector
from kite.interfaces.user_directory import UserDirectory

# pylint: disable=too-few-public-methods

NO_TEAMS_MSG = (
    "No teams found for the current user.\n"
    "Ask an administrator to add you to a team, then run 'kite login' again."
)


class InteractiveTeamSelector(TeamSelector):
    """TeamSelector that asks the user to pick from a numbered list."""

    def __init__(self, stdout: TextIO | None = None) -> None:
        self._stdout = stdout

    def select_team(self, directory: UserDirectory, stdin: TextIO) -> tuple[str, str]:
        teams = directory.list_teams()
        if not teams:
            raise SelectionError(NO_TEAMS_MSG)

        click.echo("\nSelect your default team:", file=self._stdout)
        for number, team in enumerate(teams, start=1):
            click.echo(f"  {number}) {team.name}", file=self._stdout)
        click.echo(f"Team [1-{len(teams)}]: ", nl=False, file=self._stdout)

        line = stdin.readline()
        if not line:
            raise SelectionError("No team selected (end of input)")

        choice = line.strip()
        try:
            index = int(choice)
        except ValueError:
            raise SelectionError(f"Invalid team choice {choice!r}") from None
        if not 1 <= index <= len(teams):
            raise SelectionError(
                f"Team choice {index} is out of range (1-{len(teams)})"
            )

        team = teams[index - 1]
        return team.id, team.name
