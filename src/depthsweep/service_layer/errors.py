"""Service-layer error definitions."""


class SweepTimeoutError(Exception):
    """Raised when a sweep exceeds its wall-clock budget.

    Attributes:
        depth (int | None): The depth about to be called, or None before deployment.
        elapsed_s (float): Seconds elapsed since the sweep started.
        budget_s (float): The configured budget in seconds.
    """

    def __init__(self, depth: int | None, elapsed_s: float, budget_s: float) -> None:
        where = "before deployment" if depth is None else f"at depth {depth}"
        super().__init__(
            f"Sweep timed out {where} after {elapsed_s:.1f}s "
            f"(budget {budget_s:.1f}s)."
        )
        self.depth = depth
        self.elapsed_s = elapsed_s
        self.budget_s = budget_s
