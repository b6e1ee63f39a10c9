"""Adapters (infrastructure) for kite.

Provide concrete implementations of the ports in `kite.interfaces`: the JSON
config file, the REST client for the remote user directory, interactive
prompting and team selection over text streams, and secret redaction.

Dependency rule: may import `kite.domain` and `kite.interfaces`; the domain
must not import this package.
"""
