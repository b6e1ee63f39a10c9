"""User directory interface definitions.

The user directory is the remote service that knows who the API key belongs
to. Implementations report failures through a small error hierarchy so callers
can tell an explicit authentication rejection apart from every other failure
without inspecting transport-specific exception types.
"""

import abc
from dataclasses import dataclass, field

# ============================================================================
#                           Value objects
# ============================================================================


@dataclass(frozen=True)
class Team:
    """A team the current user belongs to."""

    id: str
    name: str


@dataclass(frozen=True)
class Identity:
    """The authenticated user behind an API key."""

    id: str
    name: str
    email: str = ""
    teams: tuple[Team, ...] = field(default=())


# ============================================================================
#                           Errors
# ============================================================================


class DirectoryError(Exception):
    """Base class for user directory errors."""


class AuthenticationRejectedError(DirectoryError):
    """Raised when the remote service rejects the credentials."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Authentication rejected with status {status_code}")
        self.status_code = status_code


class DirectoryRequestError(DirectoryError):
    """Raised when the remote service answers with any other error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Request failed with status {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class DirectoryUnavailableError(DirectoryError):
    """Raised when the remote service cannot be reached or answers garbage."""


# ============================================================================
#                           Port
# ============================================================================


class UserDirectory(abc.ABC):
    """Contract for the remote user directory."""

    @abc.abstractmethod
    def get_current_user(self) -> Identity:
        """Return the identity the connection is authenticated as.

        Raises:
            AuthenticationRejectedError: If the credentials are rejected.
            DirectoryRequestError: On any other error status.
            DirectoryUnavailableError: On transport failure or malformed payload.
        """

    @abc.abstractmethod
    def list_teams(self) -> list[Team]:
        """Return the teams the current user belongs to.

        Raises:
            DirectoryError: Same conditions as `get_current_user`.
        """
