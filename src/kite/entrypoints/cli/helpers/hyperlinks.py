"""OSC-8 hyperlink utilities for the kite CLI.

Detects whether the active text stream is a terminal known to render OSC-8
hyperlinks and renders URLs as clickable links there, as plain text elsewhere.
Pure formatting only.
"""

import os
import sys
from typing import TextIO

OSC8_TERM_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether *stream* supports OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``False`` for anything that is not a TTY; otherwise ``True`` when
        the terminal is on a small allowlist (VS Code, iTerm2, WezTerm, Kitty,
        Windows Terminal, VTE-based terminals, Alacritty, Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERM_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, label: str | None = None) -> str:
    """Render *url* as an OSC-8 hyperlink when the terminal supports it.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself. Ignored when links are
            unsupported, since the bare URL must stay readable.

    Returns:
        str: The BEL-terminated OSC-8 sequence, or the plain URL.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"
