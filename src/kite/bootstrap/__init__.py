"""Bootstrap (composition root) for kite.

Assembles the application at runtime: reads configuration, wires concrete
adapters (JSON config store, REST user directory, interactive prompter and
team selector) into the service-layer session bootstrapper, and owns the
lifetime of the resources it creates.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `kite.adapters`, `kite.service_layer`,
  `kite.interfaces`, `kite.domain`, and `kite.config`.
- Inner layers must not import `kite.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import REDACTOR_MODES, LoginApp, bootstrap_login, build_redactor

__all__ = ["REDACTOR_MODES", "LoginApp", "bootstrap_login", "build_redactor"]
