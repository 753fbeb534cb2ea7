"""Adapters (infrastructure) for DEPTHSWEEP.

Provide concrete implementations of the ports in `depthsweep.interfaces`:
the gas-metered in-memory execution environment, run-id generators and
diagnostic reporters.

Dependency rule: may import `depthsweep.interfaces` and `depthsweep.domain`;
the domain must not import this package.
"""
