"""The configuration record persisted between kite invocations."""

from dataclasses import dataclass

MASK = "***"


def mask_secret(value: str) -> str:
    """Return a display-safe rendering of a secret.

    Empty values stay empty so "unset" remains recognisable; anything else is
    replaced by a fixed placeholder.
    """
    return MASK if value else ""


@dataclass
class ConfigRecord:
    """Value object holding credentials and the default team.

    An empty string means "unset" for every field. `team_id` and `team_name`
    are only ever set together; use `set_team` / `clear_team` to change them.
    """

    api_key: str = ""
    access_token: str = ""
    team_id: str = ""
    team_name: str = ""

    def __repr__(self) -> str:
        return (
            f"ConfigRecord(api_key={mask_secret(self.api_key)!r}, "
            f"access_token={mask_secret(self.access_token)!r}, "
            f"team_id={self.team_id!r}, team_name={self.team_name!r})"
        )

    @property
    def has_credentials(self) -> bool:
        """True when both the API key and the access token are set."""
        return bool(self.api_key and self.access_token)

    @property
    def has_team(self) -> bool:
        """True when a default team has been recorded."""
        return bool(self.team_id and self.team_name)

    def set_team(self, team_id: str, team_name: str) -> None:
        """Record the default team.

        Raises:
            ValueError: If either half of the pair is empty.
        """
        if not team_id or not team_name:
            raise ValueError(
                f"team id and name must be set together (id={team_id!r}, name={team_name!r})"
            )
        self.team_id = team_id
        self.team_name = team_name

    def clear_team(self) -> None:
        """Forget the default team."""
        self.team_id = ""
        self.team_name = ""
