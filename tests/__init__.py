"""DEPTHSWEEP test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across every implementation of a port.
- integration/  : Wiring through the bootstrap, message bus and real adapters.
- functional/   : User-visible CLI features (help, version).
- e2e/          : Full CLI runs through Click's test runner.
- helpers/      : Shared fakes and utilities (no tests here).

General guidance
- Keep unit tests fast and deterministic; prefer the fakes in `tests.helpers.fakes`.
- Contract tests parametrize implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
