"""Parse ``-L NAME=LEVEL`` options into per-logger levels.

Values arrive either as a tuple (repeated CLI flags) or as one string (the
``KITE_LOGGER_LEVEL`` environment variable) and may contain several
comma/space separated pairs.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"httpx": logging.WARNING, "httpcore": logging.WARNING}
SEPARATORS = re.compile(r"[,\s]+")


def _split_pairs(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten *value* into individual non-empty NAME=LEVEL fragments."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name->level mapping.

    Starts from DEFAULT_LIB_LEVELS; later pairs override earlier ones. Level
    names are case-insensitive standard logging names.

    Raises:
        click.BadParameter: If a pair is malformed or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_pairs(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelName(level_name.strip().upper())
        if not isinstance(level, int):
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
