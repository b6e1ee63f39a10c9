"""Configuration utilities for kite.

This module centralizes small helpers and constants related to application
configuration: where the persisted config file lives, which API endpoint to
talk to, and the help URLs shown when credentials are missing.
"""

import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "kite"

API_KEY_URL = "https://support.pagerduty.com/docs/api-access-keys#generate-a-user-token-rest-api-key"
ACCESS_TOKEN_URL = "https://github.com/settings/tokens"

DEFAULT_API_URL = "https://api.pagerduty.com"
DEFAULT_TIMEOUT = 10.0  # seconds

CONFIG_PATH_ENV = "KITE_CONFIG_PATH"  # pragma: no mutate
API_URL_ENV = "KITE_API_URL"  # pragma: no mutate
CONFIG_FILE_NAME = "config.json"


def get_config_path() -> Path:
    """Get the path of the persisted configuration file.

    Returns:
        The value of `KITE_CONFIG_PATH` when set, otherwise ``config.json``
        inside the platform's per-user config directory for kite.
    """
    if override := os.environ.get(CONFIG_PATH_ENV):
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILE_NAME


def get_api_url() -> str:
    """Get the base URL of the remote API.

    Returns:
        The value of `KITE_API_URL` without a trailing slash, or
        `DEFAULT_API_URL` when unset.
    """
    return (os.environ.get(API_URL_ENV) or DEFAULT_API_URL).rstrip("/")
