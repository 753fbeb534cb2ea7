"""Entrypoints (inbound adapters) for DEPTHSWEEP.

Expose the application to the outside world: currently the command-line
interface. Parse and validate inputs, call service-layer handlers through
the bootstrap, and present results.

Dependency rule: may import `depthsweep.bootstrap` and
`depthsweep.service_layer`; avoid importing `depthsweep.adapters` directly.
"""
