"""CLI helpers for kite.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, NAME=LEVEL logger option parsing, and a status-line emitter that
writes to stderr with an emoji→ASCII fallback.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import success

__all__ = ["hyperlink", "parse_log_level", "success"]
