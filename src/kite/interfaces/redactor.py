"""Interfaces for redacting sensitive values.

This module defines the Redactor interface and the RedactorMode enumeration
used by adapters to sanitize secrets (API keys, access tokens, authorization
headers) from free-form strings such as log messages and error text.
"""

import abc
from enum import Enum

# pylint: disable=too-few-public-methods


class RedactorMode(Enum):
    """Enumeration for redactor modes.

    Modes:
    - LENIENT: redact keys/tokens but keep emails visible.
    - STRICT: redact keys/tokens and also emails.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class Redactor(abc.ABC):
    """Interface for sanitizing sensitive information from strings."""

    _mode: RedactorMode

    @abc.abstractmethod
    def sanitize(self, text: str) -> str:
        """Return a display-safe copy of *text*.

        Args:
            text: Raw text that may contain secrets.

        Returns:
            The text with sensitive values replaced by a placeholder.
        """

    @property
    def mode(self) -> RedactorMode:
        """Return the redaction mode."""
        return self._mode
