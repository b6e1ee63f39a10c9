"""Team selector interface."""

import abc
from typing import TextIO

from .user_directory import UserDirectory

# pylint: disable=too-few-public-methods


class TeamSelector(abc.ABC):
    """Interface for choosing the user's default team."""

    @abc.abstractmethod
    def select_team(self, directory: UserDirectory, stdin: TextIO) -> tuple[str, str]:
        """Pick a default team.

        Args:
            directory: Connected user directory used to list the user's teams.
            stdin: Text stream the choice is read from.

        Returns:
            tuple[str, str]: The chosen team's ``(team_id, team_name)``; both
            are non-empty.

        Raises:
            SelectionError: If no team could be selected.
        """
