"""Domain layer for DEPTHSWEEP.

Contains the rules of an equivalence sweep: depth ranges, result records,
the sweep state machine and its report, and the closed-form reference sum.
This package is deliberately technology-agnostic.

Dependency rule: do not import from `depthsweep.adapters` or
`depthsweep.entrypoints`.
"""
