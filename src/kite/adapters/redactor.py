"""Regex-based redactor for sanitizing secrets from strings.

This module provides a Redactor implementation that masks sensitive values
(API keys, access tokens, etc.) found in PagerDuty-style ``Token token=...``
authorization headers, bearer tokens, query strings and free-form
"key: value" / "key=value" fragments. It supports lenient and strict modes
(strict also redacts email addresses).
"""

import re

from kite.interfaces import redactor
from kite.interfaces.redactor import RedactorMode

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
SECRET_KEYWORDS = [
    "password",
    "secret",
    "token",
    "api_key",
    "apikey",
    "access_token",
    "authorization",
]
SECRET_KEYWORDS_PATTERN = "|".join(kw.replace("_", "[-_ ]?") for kw in SECRET_KEYWORDS)
TOKEN_HEADER_PATTERN = re.compile(r"(Token\s+token=)[^\s,;&\"']+", re.IGNORECASE)
BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s,;\"']+", re.IGNORECASE)
QUERY_STRING_PATTERN = re.compile(
    rf"([?&](?:{SECRET_KEYWORDS_PATTERN})=)[^&#\s;]*", re.IGNORECASE
)
KEY_VALUE_SECRET_PATTERN = re.compile(
    rf"(\b(?:{SECRET_KEYWORDS_PATTERN})\"?\s*[:=]\s*\"?)(?!\*\*\*)[^\s\",;]+",
    re.IGNORECASE,
)
EMAIL_PATTERN = re.compile(r"\b[\w.+-]+@[\w-]+(?:\.[\w-]+)+\b")


class Redactor(redactor.Redactor):
    """Redactor implementation using regex-based sanitization."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode

    def sanitize(self, text: str) -> str:
        sanitized = str(text)

        # 1) Token token=<key>  (PagerDuty REST auth header)
        sanitized = TOKEN_HEADER_PATTERN.sub(rf"\1{PLACEHOLDER}", sanitized)

        # 2) Bearer <token>
        sanitized = BEARER_PATTERN.sub(rf"\1{PLACEHOLDER}", sanitized)

        # 3) Query-string secrets
        sanitized = QUERY_STRING_PATTERN.sub(rf"\1{PLACEHOLDER}", sanitized)

        # 4) key: value / key=value secrets
        sanitized = KEY_VALUE_SECRET_PATTERN.sub(rf"\1{PLACEHOLDER}", sanitized)

        # 5) Strict: email addresses
        if self._mode == RedactorMode.STRICT:
            sanitized = EMAIL_PATTERN.sub(PLACEHOLDER, sanitized)

        return sanitized
