"""kite

A command-line companion for an incident-management API. This package holds
the session bootstrap behind ``kite login``: credentials are acquired and
persisted, the API key is verified against the remote service, and a default
team is recorded before any other command runs.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
