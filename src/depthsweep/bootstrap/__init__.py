"""Bootstrap (composition root) for DEPTHSWEEP.

Assembles the application at runtime: wires concrete adapters (contract
factory, run-id generator, reporter) into service-layer handlers, composes
the message bus, and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain
  for wiring).
- This package may import: `depthsweep.adapters`, `depthsweep.service_layer`,
  `depthsweep.interfaces`, `depthsweep.domain`, and `depthsweep.config`.
- Inner layers must not import `depthsweep.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
