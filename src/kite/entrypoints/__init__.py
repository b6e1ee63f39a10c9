"""Entrypoints (inbound adapters) for kite.

Expose the application to the outside world through the CLI. Parse and
validate inputs, call the composition root, and present results.

Dependency rule: may import `kite.bootstrap` and `kite.service_layer`; avoid
importing `kite.adapters` directly.
"""
