"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, plus fixtures to register that command, obtain a CliRunner, run
tests within an isolated filesystem, and point `kite login` at a fake API.
"""

import logging
from functools import partial

import click
import httpx
import pytest
from click.testing import CliRunner

import kite.entrypoints.cli.login as login_module
from kite.bootstrap import bootstrap_login
from kite.entrypoints.cli.main import kite

# pylint: disable=redefined-outer-name

logger = logging.getLogger("kite.fake_api")

API_USER = {
    "id": "PUSER1",
    "name": "Jane Doe",
    "email": "jane@example.com",
    "teams": [
        {"id": "PTEAM1", "summary": "SRE Platform"},
        {"id": "PTEAM2", "summary": "Databases"},
    ],
}


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'kite.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior. One message carries
    an API key so redaction can be checked.
    """
    logger = logging.getLogger("kite.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.warning("Sending header Authorization: Token token=%s", "s3cr3t-key")
    logger.info("Authenticated as %s", "jane@example.com")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    kite.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(kite, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated working directory for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def fake_api(monkeypatch):
    """Route `kite login` to an in-process fake API.

    Returns a mutable dict: set ``status`` to change the answer and read
    ``requests`` to inspect what was sent. Every request is logged at DEBUG
    with its Authorization header, as a verbose HTTP trace would.
    """
    state: dict = {"status": 200, "requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        logger.debug("Received Authorization: %s", request.headers["Authorization"])
        if state["status"] == 200:
            return httpx.Response(200, json={"user": API_USER})
        return httpx.Response(
            state["status"], json={"error": {"message": "Unauthorized", "code": 2006}}
        )

    monkeypatch.setattr(
        login_module,
        "bootstrap_login",
        partial(bootstrap_login, transport=httpx.MockTransport(handler)),
    )
    return state
