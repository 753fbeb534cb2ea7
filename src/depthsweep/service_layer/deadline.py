"""Wall-clock budget for a sweep."""

import math
import time
from collections.abc import Callable

from .errors import SweepTimeoutError

# pylint: disable=too-few-public-methods


class Deadline:
    """Track elapsed time against a budget using a monotonic clock.

    Calls into the execution environment block, so the budget is enforced
    between calls: `check` raises once the budget is spent.
    """

    def __init__(
        self, budget_s: float, clock: Callable[[], float] = time.monotonic
    ) -> None:
        if not 0 < budget_s < math.inf:
            raise ValueError(f"budget_s must be positive and finite, got {budget_s}")
        self.budget_s = budget_s
        self._clock = clock
        self._started = clock()

    @property
    def elapsed_s(self) -> float:
        """Seconds elapsed since the deadline was created."""
        return self._clock() - self._started

    def check(self, depth: int | None = None) -> None:
        """Raise `SweepTimeoutError` if the budget has been exceeded."""
        if (elapsed := self.elapsed_s) > self.budget_s:
            raise SweepTimeoutError(depth, elapsed, self.budget_s)
