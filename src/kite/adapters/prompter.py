"""Line-oriented prompter over text streams."""

from typing import TextIO

import click

from kite.domain.errors import InputError
from kite.interfaces.prompter import Prompter

# pylint: disable=too-few-public-methods


class StreamPrompter(Prompter):
    """Prompter that writes to an output stream and reads whole lines from *stdin*.

    Guidance and labels go through `click.echo` so they land on the same
    stream Click uses (stdout unless *stdout* is given). A line is only
    accepted when it is terminated; end of input raises `InputError`.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def ask(self, guidance: str, label: str) -> str:
        click.echo(guidance, file=self._stdout)
        click.echo(label, nl=False, file=self._stdout)
        try:
            line = self._stdin.readline()
        except (OSError, ValueError) as e:
            raise InputError(f"Cannot read {_field(label)}: {e}") from e
        if not line.endswith("\n"):
            raise InputError(f"Unexpected end of input while reading {_field(label)}")
        return line


def _field(label: str) -> str:
    """'API Key: ' -> 'API Key'"""
    return label.strip().rstrip(":")
