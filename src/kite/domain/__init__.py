"""Domain layer for kite.

Contains the configuration record and the error taxonomy shared by every
layer. This package is deliberately technology-agnostic.

Dependency rule: do not import from `kite.adapters` or `kite.entrypoints`.
"""
