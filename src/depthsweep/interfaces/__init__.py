"""Interfaces (application boundary) for DEPTHSWEEP.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (the contract under test and its factory,
diagnostic reporters, run-id generators). Business rules stay out of this
package.

Dependency rule: this package is independent; do not import from any
`depthsweep.*` modules at runtime (domain value objects may appear under
`TYPE_CHECKING` for annotations only). It may be imported by
`depthsweep.domain`, `depthsweep.service_layer`, `depthsweep.adapters`, and
`depthsweep.bootstrap`.
"""
