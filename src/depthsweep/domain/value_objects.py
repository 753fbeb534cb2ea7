"""Module including value objects used across the domain layer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from depthsweep.config import DEFAULT_MAX_DEPTH, DEFAULT_START_DEPTH

from .errors import InvalidDepthRangeError


class SweepStatus(Enum):
    """Lifecycle of an equivalence sweep."""

    NOT_DEPLOYED = "not_deployed"
    DEPLOYED = "deployed"
    SWEEPING = "sweeping"
    PASSED = "passed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """True once the sweep has passed or failed."""
        return self in (SweepStatus.PASSED, SweepStatus.FAILED)


class ProbeOutcome(Enum):
    """Classification of a single-depth probe of the recursive entry point."""

    EQUAL = "equal"
    MISMATCH = "mismatch"
    OUT_OF_GAS = "out_of_gas"
    CALL_DEPTH_EXCEEDED = "call_depth_exceeded"
    REVERTED = "reverted"


@dataclass(frozen=True)
class DepthRange:
    """Inclusive, ascending range of depths swept one after another."""

    start: int = DEFAULT_START_DEPTH
    stop: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        for bound in (self.start, self.stop):
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise InvalidDepthRangeError(self.start, self.stop)
        if self.start < 1 or self.stop < self.start:
            raise InvalidDepthRangeError(self.start, self.stop)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.stop + 1))

    def __len__(self) -> int:
        return self.stop - self.start + 1

    def __contains__(self, depth: object) -> bool:
        return isinstance(depth, int) and self.start <= depth <= self.stop


@dataclass(frozen=True)
class DepthRecord:
    """Result pair of both entry points for one depth."""

    depth: int
    iterative: int
    recursive: int

    @property
    def matches(self) -> bool:
        """Exact integer equality of the two results."""
        return self.iterative == self.recursive


@dataclass(frozen=True)
class SweepReport:
    """Snapshot of a sweep: its identity, verdict and the records compared so far."""

    run_id: str
    depths: DepthRange
    status: SweepStatus
    contract_address: str | None = None
    records: tuple[DepthRecord, ...] = field(default_factory=tuple)
    failure: str | None = None

    @property
    def passed(self) -> bool:
        """True when every depth in the range compared equal."""
        return self.status is SweepStatus.PASSED

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation of the report."""
        return {
            "run_id": self.run_id,
            "status": self.status.value,
            "contract_address": self.contract_address,
            "start_depth": self.depths.start,
            "max_depth": self.depths.stop,
            "records": [
                {"depth": r.depth, "iterative": r.iterative, "recursive": r.recursive}
                for r in self.records
            ],
            "failure": self.failure,
        }


@dataclass(frozen=True)
class ExhaustionProbeResult:
    """Outcome of calling both entry points once at a (typically large) depth.

    ``iterative`` and ``recursive`` are ``None`` when the corresponding call
    did not return a value.
    """

    depth: int
    outcome: ProbeOutcome
    iterative: int | None = None
    recursive: int | None = None
    detail: str | None = None
