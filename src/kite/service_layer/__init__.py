"""Service layer for kite.

Orchestrates use cases over the ports in `kite.interfaces`. The only use case
today is the session bootstrap run by ``kite login``.
"""
