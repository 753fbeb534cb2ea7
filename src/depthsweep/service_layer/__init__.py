"""Service layer for DEPTHSWEEP.

Implements application use-cases: the depth sweep, the exhaustion probe and
the exhaustion-depth search, plus the message bus that routes commands to
them.

Dependency rule: may import `depthsweep.config` (defaults),
`depthsweep.domain` and `depthsweep.interfaces`, but not `depthsweep.adapters` or `depthsweep.entrypoints`.
"""
