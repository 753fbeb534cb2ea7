"""Equivalence Sweep Aggregate"""

from __future__ import annotations

from .errors import EquivalenceMismatchError, InvalidTransitionError
from .value_objects import DepthRange, DepthRecord, SweepReport, SweepStatus

_ALLOWED_TRANSITIONS: dict[SweepStatus, frozenset[SweepStatus]] = {
    SweepStatus.NOT_DEPLOYED: frozenset({SweepStatus.DEPLOYED, SweepStatus.FAILED}),
    SweepStatus.DEPLOYED: frozenset({SweepStatus.SWEEPING, SweepStatus.FAILED}),
    SweepStatus.SWEEPING: frozenset({SweepStatus.PASSED, SweepStatus.FAILED}),
    SweepStatus.PASSED: frozenset(),
    SweepStatus.FAILED: frozenset(),
}


class EquivalenceSweep:
    """Aggregate root tracking one sweep over a depth range.

    The sweep owns the ordering rule: depths are recorded strictly in the
    ascending order of its range, and the first mismatch fails the sweep.
    """

    def __init__(self, run_id: str, depths: DepthRange) -> None:
        self.run_id = run_id
        self.depths = depths
        self.status = SweepStatus.NOT_DEPLOYED
        self.contract_address: str | None = None
        self.records: list[DepthRecord] = []
        self.failure: str | None = None

    # --- Transitions ---

    def mark_deployed(self, contract_address: str) -> None:
        """Record the address of the freshly deployed contract."""
        self._transition(SweepStatus.DEPLOYED)
        self.contract_address = contract_address

    def record(self, depth: int, iterative: int, recursive: int) -> DepthRecord:
        """Record the result pair for the next expected depth.

        Raises:
            InvalidTransitionError: If the sweep is not running or ``depth`` is
                not the next depth of the range.
            EquivalenceMismatchError: If the results differ. The sweep is
                marked FAILED before the error is raised.
        """
        if self.status not in (SweepStatus.DEPLOYED, SweepStatus.SWEEPING):
            raise InvalidTransitionError(
                f"Cannot record depth {depth} while sweep is {self.status.value}."
            )
        if depth != (expected := self.next_depth):
            raise InvalidTransitionError(f"Expected depth {expected}, got {depth}.")
        if self.status is SweepStatus.DEPLOYED:
            self._transition(SweepStatus.SWEEPING)

        record = DepthRecord(depth=depth, iterative=iterative, recursive=recursive)
        if not record.matches:
            error = EquivalenceMismatchError(depth, iterative, recursive)
            self.fail(str(error))
            raise error
        self.records.append(record)
        if depth == self.depths.stop:
            self._transition(SweepStatus.PASSED)
        return record

    def fail(self, reason: str) -> None:
        """Mark the sweep FAILED with a short description of the cause."""
        self._transition(SweepStatus.FAILED)
        self.failure = reason

    # --- Queries ---

    @property
    def next_depth(self) -> int | None:
        """The depth expected by the next call to `record`, or None when done."""
        if self.status.is_terminal:
            return None
        return self.depths.start + len(self.records)

    def snapshot(self) -> SweepReport:
        """Return an immutable report of the sweep's current state."""
        return SweepReport(
            run_id=self.run_id,
            depths=self.depths,
            status=self.status,
            contract_address=self.contract_address,
            records=tuple(self.records),
            failure=self.failure,
        )

    def _transition(self, target: SweepStatus) -> None:
        if target not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Sweep {self.run_id} cannot move from "
                f"{self.status.value} to {target.value}."
            )
        self.status = target
