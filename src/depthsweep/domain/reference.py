"""Closed-form reference for the summation computed by the contract."""


def triangular(depth: int) -> int:
    """Return ``1 + 2 + ... + depth`` (``0`` for ``depth == 0``).

    Args:
        depth: A non-negative integer.

    Raises:
        ValueError: If ``depth`` is negative.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return depth * (depth + 1) // 2
