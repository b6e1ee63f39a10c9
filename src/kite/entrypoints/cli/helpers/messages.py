"""Terminal message helpers for the kite CLI.

Small helpers for rendering user-visible status lines with emoji→ASCII
fallbacks. Status lines write to stderr so stdout only carries the prompts
and the login result.
"""

import click

SUCCESS_GLYPHS = ("✅", "[OK]")


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call, so redirected or re-encoded
    stderr streams are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def success_glyph() -> str:
    """Return the success emoji, or its ASCII fallback."""
    emoji, fallback = SUCCESS_GLYPHS
    return emoji if _supports_character(emoji) else fallback


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)
