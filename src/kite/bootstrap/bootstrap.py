"""Wire the login flow to its concrete adapters."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import ExitStack
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, TextIO

from kite import config
from kite.adapters.config_store import JsonFileConfigStore
from kite.adapters.pagerduty import connect
from kite.adapters.prompter import StreamPrompter
from kite.adapters.redactor import Redactor as RegexRedactor
from kite.adapters.team_selector import InteractiveTeamSelector
from kite.interfaces.redactor import RedactorMode
from kite.service_layer.session import SessionBootstrapper

# lenient first: it is the default
REDACTOR_MODES = [mode.value for mode in RedactorMode]

if TYPE_CHECKING:
    import httpx

    from kite.interfaces.config_store import ConfigStore
    from kite.interfaces.redactor import Redactor
    from kite.interfaces.user_directory import UserDirectory
    from kite.service_layer.session import Connector


@dataclass
class LoginApp:
    """The assembled login flow plus the resources it opened.

    Use as a context manager so every directory client gets closed.
    """

    session: SessionBootstrapper
    resources: ExitStack = field(default_factory=ExitStack)

    def __enter__(self) -> LoginApp:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release every resource opened while running the flow."""
        self.resources.close()


def build_connector(
    resources: ExitStack,
    *,
    base_url: str,
    timeout: float = config.DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> Connector:
    """Build a connector whose clients are closed together with *resources*."""
    open_client = partial(connect, base_url=base_url, timeout=timeout, transport=transport)

    def _connect(api_key: str) -> UserDirectory:
        return resources.enter_context(open_client(api_key))

    return _connect


def bootstrap_login(
    *,
    stdin: TextIO,
    stdout: TextIO | None = None,
    store: ConfigStore | None = None,
    base_url: str | None = None,
    transport: httpx.BaseTransport | None = None,
    announce: Callable[[str], None] | None = None,
) -> LoginApp:
    """Assemble the login flow.

    Args:
        stdin: Stream prompts and the team choice are read from.
        stdout: Stream prompts are written to; Click's stdout when omitted.
        store: Config store; defaults to the JSON file at `config.get_config_path()`.
        base_url: API base URL; defaults to `config.get_api_url()`.
        transport: Optional HTTP transport (tests use `httpx.MockTransport`).
        announce: Called with the user name once the API key is verified.

    Returns:
        LoginApp: The bootstrapper and the resources to close afterwards.
    """
    resources = ExitStack()
    session = SessionBootstrapper(
        store=store or JsonFileConfigStore(config.get_config_path()),
        connect=build_connector(
            resources, base_url=base_url or config.get_api_url(), transport=transport
        ),
        selector=InteractiveTeamSelector(stdout=stdout),
        prompter=StreamPrompter(stdin, stdout),
        stdin=stdin,
        announce=announce,
    )
    return LoginApp(session=session, resources=resources)


def build_redactor(mode: str) -> Redactor:
    """Build the secret redactor for *mode* ("lenient" or "strict", any case)."""
    return RegexRedactor(RedactorMode(mode.lower()))
