"""Interfaces (application boundary) for kite.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (config store, user directory, team selector,
prompter, redactor). Business rules stay out of this package.

Dependency rule: may import `kite.domain` only. It may be imported by
`kite.service_layer`, `kite.adapters`, and `kite.bootstrap`.
"""
