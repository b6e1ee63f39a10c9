"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class KiteError(Exception):
    """Base class for kite errors."""


# ============================================================================
#                   Configuration persistence errors
# ============================================================================


class ConfigUnavailableError(KiteError):
    """Raised when the persisted configuration is missing, unreadable or malformed."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Configuration at {location} is unavailable: {reason}")
        self.location = location
        self.reason = reason


class PersistenceError(KiteError):
    """Raised when the configuration cannot be written."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Failed to save configuration to {location}: {reason}")
        self.location = location
        self.reason = reason


# ============================================================================
#                   Login flow errors
# ============================================================================


class InputError(KiteError):
    """Raised when interactive input cannot be read or is unusable."""


class LoginFailedError(KiteError):
    """Raised when the remote service rejects the API key."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"login failed\n{status_code} Unauthorized")
        self.status_code = status_code


class SelectionError(KiteError):
    """Raised when a default team cannot be selected."""
