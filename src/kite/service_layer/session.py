"""Session bootstrap behind ``kite login``.

The flow runs four stages over a single `ConfigRecord`, strictly in order and
stopping at the first error:

1. `load_config`: read the persisted record, or start from an empty one.
2. `acquire_credentials`: make sure an API key and an access token exist,
   prompting for missing ones and saving after every change.
3. `verify_identity`: ask the user directory who the API key belongs to.
4. `resolve_team`: make sure a default team is recorded.

A final save always follows. Writes are never rolled back: whatever was saved
before a failure stays saved.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from kite import config
from kite.domain.config_record import ConfigRecord
from kite.domain.errors import ConfigUnavailableError, InputError, LoginFailedError
from kite.interfaces.user_directory import AuthenticationRejectedError

if TYPE_CHECKING:
    from kite.interfaces.config_store import ConfigStore
    from kite.interfaces.prompter import Prompter
    from kite.interfaces.team_selector import TeamSelector
    from kite.interfaces.user_directory import UserDirectory

logger = logging.getLogger(__name__)

API_KEY_GUIDANCE = (
    "In order to login it is mandatory to provide an API key.\n"
    f"The recommended way is to generate an API key via: {config.API_KEY_URL}"
)
API_KEY_LABEL = "API Key: "

ACCESS_TOKEN_GUIDANCE = (
    "\nIn order to view SOPs it is mandatory to provide a GitHub Access Token.\n"
    f"The recommended way is to generate a token via: {config.ACCESS_TOKEN_URL}"
)
ACCESS_TOKEN_LABEL = "GitHub Access Token: "

Connector = Callable[[str], "UserDirectory"]


class SessionState(Enum):
    """Stages of the login flow, in the order they are entered."""

    LOADING = "loading"
    ACQUIRING_KEY = "acquiring key"
    ACQUIRING_TOKEN = "acquiring token"
    CONNECTING = "connecting"
    AUTHENTICATING = "authenticating"
    RESOLVING_TEAM = "resolving team"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class LoginOptions:
    """Explicit overrides supplied by the caller (e.g. ``--api-key``).

    Empty strings mean "no override".
    """

    api_key: str = ""
    access_token: str = ""


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    user_name: str
    record: ConfigRecord


# ============================================================================
#                                Stages
# ============================================================================


def load_config(store: ConfigStore) -> ConfigRecord:
    """Load the persisted record, or return an empty one if none is usable.

    A missing, unreadable or malformed configuration is treated like a first
    run; `ConfigUnavailableError` never escapes this function.
    """
    try:
        return store.load()
    except ConfigUnavailableError as e:
        logger.info("Starting from an empty configuration: %s", e)
        return ConfigRecord()


def _read_secret(prompter: Prompter, guidance: str, label: str) -> str:
    # Trailing line terminators are stripped for every secret.
    value = prompter.ask(guidance, label).rstrip("\r\n")
    if not value:
        raise InputError(f"{label.strip().rstrip(':')} must not be empty")
    return value


def acquire_api_key(
    record: ConfigRecord, options: LoginOptions, store: ConfigStore, prompter: Prompter
) -> None:
    """Ensure `record.api_key` is set, saving as soon as it changes."""
    if options.api_key:
        record.api_key = options.api_key
        store.save(record)
        logger.info("API key overridden from the command line")

    if not record.api_key:
        record.api_key = _read_secret(prompter, API_KEY_GUIDANCE, API_KEY_LABEL)
        store.save(record)
        logger.info("API key stored")


def acquire_access_token(
    record: ConfigRecord, options: LoginOptions, store: ConfigStore, prompter: Prompter
) -> None:
    """Ensure `record.access_token` is set, saving as soon as it changes."""
    if options.access_token:
        record.access_token = options.access_token
        store.save(record)
        logger.info("Access token overridden from the command line")

    if not record.access_token:
        record.access_token = _read_secret(
            prompter, ACCESS_TOKEN_GUIDANCE, ACCESS_TOKEN_LABEL
        )
        store.save(record)
        logger.info("Access token stored")


def acquire_credentials(
    record: ConfigRecord, options: LoginOptions, store: ConfigStore, prompter: Prompter
) -> None:
    """Ensure both the API key and the access token are set.

    Raises:
        InputError: If a prompt cannot be answered.
        PersistenceError: If a save fails.
    """
    acquire_api_key(record, options, store, prompter)
    acquire_access_token(record, options, store, prompter)


def verify_identity(api_key: str, directory: UserDirectory) -> str:
    """Return the display name of the user *api_key* belongs to.

    Requests that cannot be authenticated are answered with a 401 by the
    remote service; that case is reported as `LoginFailedError`. Every other
    failure propagates unchanged.

    Raises:
        ValueError: If *api_key* is empty.
        LoginFailedError: If the remote service rejects the key.
    """
    if not api_key:
        raise ValueError("Cannot verify an empty API key")
    try:
        identity = directory.get_current_user()
    except AuthenticationRejectedError as e:
        raise LoginFailedError(e.status_code) from None
    return identity.name


# Public name of the verifier, matching the command it backs.
login = verify_identity


def resolve_team(
    record: ConfigRecord,
    directory: UserDirectory,
    selector: TeamSelector,
    stdin: TextIO,
) -> bool:
    """Ensure a default team is recorded.

    Returns:
        bool: True if a team was selected, False if one was already set.
    """
    if record.has_team:
        logger.debug("Default team already set: %s", record.team_name)
        return False

    team_id, team_name = selector.select_team(directory, stdin)
    record.set_team(team_id, team_name)
    logger.info("Default team set to %s", team_name)
    return True


# ============================================================================
#                             Orchestration
# ============================================================================


class SessionBootstrapper:  # pylint: disable=too-many-instance-attributes
    """Run the login flow and track which stage it reached.

    `state` is the current stage and `history` every stage entered, in order.
    `failed_at` is the stage that raised, if any.
    `announce`, when given, is called with the user name as soon as the API
    key has been verified.
    Any exception moves the bootstrapper to `SessionState.FAILED` and is
    re-raised unchanged.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        *,
        store: ConfigStore,
        connect: Connector,
        selector: TeamSelector,
        prompter: Prompter,
        stdin: TextIO,
        announce: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.connect = connect
        self.selector = selector
        self.prompter = prompter
        self.stdin = stdin
        self.announce = announce
        self.directory: UserDirectory | None = None
        self.state: SessionState | None = None
        self.failed_at: SessionState | None = None
        self.history: list[SessionState] = []

    def _enter(self, state: SessionState) -> None:
        logger.debug("login: %s", state.value)
        self.state = state
        self.history.append(state)

    def run(self, options: LoginOptions | None = None) -> LoginResult:
        """Run every stage and return the logged-in user's name and record."""
        options = options or LoginOptions()
        try:
            return self._run(options)
        except BaseException:
            self.failed_at = self.state
            self._enter(SessionState.FAILED)
            raise

    def _run(self, options: LoginOptions) -> LoginResult:
        self._enter(SessionState.LOADING)
        record = load_config(self.store)

        self._enter(SessionState.ACQUIRING_KEY)
        acquire_api_key(record, options, self.store, self.prompter)

        self._enter(SessionState.ACQUIRING_TOKEN)
        acquire_access_token(record, options, self.store, self.prompter)

        self._enter(SessionState.CONNECTING)
        self.directory = self.connect(record.api_key)

        self._enter(SessionState.AUTHENTICATING)
        user_name = verify_identity(record.api_key, self.directory)
        logger.info("Authenticated as %s", user_name)
        if self.announce is not None:
            self.announce(user_name)

        self._enter(SessionState.RESOLVING_TEAM)
        resolve_team(record, self.directory, self.selector, self.stdin)

        self._enter(SessionState.PERSISTING)
        self.store.save(record)

        self._enter(SessionState.DONE)
        return LoginResult(user_name=user_name, record=record)
