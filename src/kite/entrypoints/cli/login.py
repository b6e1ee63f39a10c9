"""``kite login``: store credentials, verify them, and pick a default team.

Behavior
- Loads the saved configuration (a missing or broken file starts fresh).
- ``--api-key`` / ``--access-token`` overwrite the stored values and are saved
  immediately; anything still missing is prompted for on stdin.
- The API key is verified against the remote service and the user name is
  printed. A default team is then selected unless one is already stored.
- You only have to log in once; later commands reuse the saved configuration.

Failure modes
- Rejected API key → ``ClickException`` with "<code> Unauthorized".
- Unreachable service, unreadable input, failed save, or no selectable team
  → ``ClickException`` carrying the underlying message.
"""

from __future__ import annotations

import logging

import click

from kite import config
from kite.bootstrap import bootstrap_login
from kite.domain.errors import KiteError
from kite.interfaces.user_directory import DirectoryError
from kite.service_layer.session import LoginOptions

from .helpers import hyperlink, success

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Successfully logged in as user: {user}"

LOGIN_HELP = """Login to the incident-management service.

    Logs the user into kite given a valid API key. You only have to log in
    once; every kite command then works even after the terminal restarts.
    """


def announce_login(user: str) -> None:
    """Print the login success line to stdout."""
    click.echo(SUCCESS_MESSAGE.format(user=user))


@click.command(help=LOGIN_HELP)
@click.option(
    "--api-key",
    "api_key",
    default="",
    metavar="KEY",
    help=(
        f"API key generated from {hyperlink(config.API_KEY_URL)}. "
        "Use this option to overwrite the existing API key."
    ),
)
@click.option(
    "--access-token",
    "access_token",
    default="",
    metavar="TOKEN",
    help=(
        f"GitHub personal access token generated from {hyperlink(config.ACCESS_TOKEN_URL)}. "
        "Use this option to overwrite the existing access token."
    ),
)
def login(api_key: str, access_token: str) -> None:
    """Login to the incident-management service."""
    stdin = click.get_text_stream("stdin")
    options = LoginOptions(api_key=api_key, access_token=access_token)

    with bootstrap_login(stdin=stdin, announce=announce_login) as app:
        try:
            app.session.run(options)
        except (KiteError, DirectoryError) as e:
            logger.error("Login failed while %s", app.session.failed_at.value)
            raise click.ClickException(str(e)) from e

    logger.info("Configuration saved to %s", app.session.store.location)
    success(f"Configuration saved to {app.session.store.location}")
