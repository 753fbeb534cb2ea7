"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidDepthRangeError(DomainError):
    """Raised when a depth range is empty, non-integer, or starts below 1."""

    def __init__(self, start: object, stop: object) -> None:
        super().__init__(
            f"Invalid depth range {start!r}..{stop!r}: "
            "bounds must be integers with 1 <= start <= stop."
        )
        self.start = start
        self.stop = stop


class InvalidTransitionError(DomainError):
    """Raised when a sweep is in an invalid state for the attempted action."""


# ============================================================================
#                           Equivalence errors
# ============================================================================


class EquivalenceMismatchError(DomainError):
    """Raised when the recursive and iterative sums disagree at a depth.

    Attributes:
        depth (int): The depth at which the results diverged.
        iterative (int): Result of the iterative entry point.
        recursive (int): Result of the recursive entry point.
    """

    def __init__(self, depth: int, iterative: int, recursive: int) -> None:
        super().__init__(
            f"Mismatch at depth {depth}: iterativeSum returned {iterative}, "
            f"recursiveSum returned {recursive}."
        )
        self.depth = depth
        self.iterative = iterative
        self.recursive = recursive
