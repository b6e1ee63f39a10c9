"""kite CLI entry point.

Defines the top-level ``kite`` command (via Click-Extra), configures logging
for every subcommand, and registers the subcommands exposed by the project.

Currently available commands
- ``kite login`` : store and verify credentials, then pick a default team.

Notes
- The CLI version is sourced from `kite.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``kite.add_command(...)``.

Examples
    $ kite --version
    $ kite login
    $ kite -v login --api-key <KEY>
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from kite import __version__
from kite.bootstrap import REDACTOR_MODES, build_redactor
from kite.logging import (
    RedactingFilter,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .login import login as login_command

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """kite command-line interface.

    kite is a terminal companion for an incident-management service. Log in
    once with 'kite login'; the API key, access token and default team are
    remembered across terminal sessions.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://github.com/openshift/pagerduty-short-circuiter"),
        "  Issues: "
        + hyperlink("https://github.com/openshift/pagerduty-short-circuiter/issues"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("kite", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="KITE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="KITE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via KITE_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity (unaffected by -v/-q) "
        "and writes them to --log-path when a WARNING/ERROR occurs, or on clean exit "
        "if --force-flush is set. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    envvar="KITE_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L httpx=INFO) or via "
        "KITE_LOGGER_LEVEL (comma/space list)."
    ),
    default=("httpx=WARNING", "httpcore=WARNING"),
    envvar="KITE_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--redactor-mode",
    "redactor_mode",
    type=click.Choice(REDACTOR_MODES, case_sensitive=False),
    help=(
        "Set the redaction mode for logs. "
        "'lenient' (default) masks API keys and tokens; "
        "'strict' also masks email addresses."
    ),
    default=REDACTOR_MODES[0],
    envvar="KITE_REDACTOR_MODE",
    show_envvar=True,
    show_default=True,
)
@clickx.pass_context
def kite(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """kite command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) mask secrets before any handler renders a record
    redacting_filter = RedactingFilter(build_redactor(redactor_mode))
    for handler in handlers:
        handler.addFilter(redacting_filter)

    # 4) Configure root logger with configured handlers
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )

    # 5) Set 3rd-party logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        redactor_mode=redactor_mode,
    )

    # 6) Ensure logging is cleanly shutdown on program exit
    ctx.call_on_close(logging.shutdown)


kite.add_command(login_command)
