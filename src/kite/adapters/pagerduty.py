"""REST adapter for the remote user directory.

Talks to a PagerDuty-compatible REST API (v2) over `httpx`. Only the calls the
login flow needs are implemented:

- ``GET /users/me`` for the authenticated identity.
- ``GET /users/me?include[]=teams`` for the teams the user belongs to.

Failures are translated into the `kite.interfaces.user_directory` error
hierarchy: HTTP 401 becomes `AuthenticationRejectedError`, other error
statuses become `DirectoryRequestError`, and transport problems or unusable
payloads become `DirectoryUnavailableError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from kite import __version__
from kite.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from kite.interfaces.user_directory import (
    AuthenticationRejectedError,
    DirectoryRequestError,
    DirectoryUnavailableError,
    Identity,
    Team,
    UserDirectory,
)

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/vnd.pagerduty+json;version=2"
CURRENT_USER_PATH = "/users/me"
UNAUTHORIZED = 401


class PagerDutyDirectory(UserDirectory):
    """UserDirectory implementation backed by the PagerDuty REST API."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def __enter__(self) -> PagerDutyDirectory:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def get_current_user(self) -> Identity:
        return self._parse_identity(self._get_current_user_payload())

    def list_teams(self) -> list[Team]:
        identity = self._parse_identity(
            self._get_current_user_payload(params={"include[]": "teams"})
        )
        return list(identity.teams)

    # --- Internal Helpers ---

    def _get_current_user_payload(
        self, params: dict[str, str] | None = None
    ) -> dict[str, Any]:
        try:
            response = self._client.get(CURRENT_USER_PATH, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DirectoryUnavailableError(
                f"Cannot reach {self._client.base_url}: {e}"
            ) from e

        logger.debug("GET %s -> %s", response.request.url.path, response.status_code)

        if response.status_code == UNAUTHORIZED:
            raise AuthenticationRejectedError(response.status_code)
        if response.is_error:
            raise DirectoryRequestError(response.status_code, _error_message(response))

        try:
            payload = response.json()
        except ValueError as e:
            raise DirectoryUnavailableError("Response body is not valid JSON") from e
        if not isinstance(payload, dict) or not isinstance(payload.get("user"), dict):
            raise DirectoryUnavailableError("Response body has no 'user' object")
        return payload["user"]

    @staticmethod
    def _parse_identity(user: dict[str, Any]) -> Identity:
        name = user.get("name")
        if not isinstance(name, str):
            raise DirectoryUnavailableError("User object has no 'name'")

        teams = []
        for ref in user.get("teams") or []:
            if not isinstance(ref, dict):
                raise DirectoryUnavailableError("Team reference is not an object")
            team_name = ref.get("summary") or ref.get("name")
            if not ref.get("id") or not team_name:
                raise DirectoryUnavailableError("Team reference lacks an id or summary")
            teams.append(Team(id=str(ref["id"]), name=str(team_name)))

        return Identity(
            id=str(user.get("id", "")),
            name=name,
            email=str(user.get("email", "")),
            teams=tuple(teams),
        )


def _error_message(response: httpx.Response) -> str:
    """Extract the API's error message, falling back to the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return response.reason_phrase


def connect(
    api_key: str,
    *,
    base_url: str = DEFAULT_API_URL,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> PagerDutyDirectory:
    """Create a directory client authenticated with *api_key*.

    Args:
        api_key: REST API key sent as ``Authorization: Token token=<key>``.
        base_url: Base URL of the API.
        timeout: Per-request timeout in seconds.
        transport: Optional transport, e.g. `httpx.MockTransport` in tests.

    Returns:
        PagerDutyDirectory: A ready-to-use client. Close it when done.

    Raises:
        ValueError: If *api_key* is empty.
        DirectoryUnavailableError: If *base_url* is not a valid URL.
    """
    if not api_key:
        raise ValueError("An API key is required to connect")

    try:
        client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Token token={api_key}",
                "Accept": ACCEPT_HEADER,
                "User-Agent": f"kite/{__version__}",
            },
        )
    except httpx.InvalidURL as e:
        raise DirectoryUnavailableError(f"Invalid API URL {base_url!r}: {e}") from e
    logger.debug("Connected directory client to %s", base_url)
    return PagerDutyDirectory(client)
