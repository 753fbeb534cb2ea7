"""Module defining Commands."""

from dataclasses import dataclass

from depthsweep.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_PROBE_DEPTH,
    DEFAULT_START_DEPTH,
    DEFAULT_TIMEOUT_S,
)


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RunDepthSweep(Command):
    """Deploy the contract and compare both sums for every depth in the range."""

    max_depth: int = DEFAULT_MAX_DEPTH
    start_depth: int = DEFAULT_START_DEPTH
    timeout_s: float = DEFAULT_TIMEOUT_S


@dataclass(frozen=True)
class ProbeExhaustion(Command):
    """Call both sums once at ``depth`` and classify the outcome."""

    depth: int = DEFAULT_PROBE_DEPTH


@dataclass(frozen=True)
class FindExhaustionDepth(Command):
    """Search ``[low, high]`` for the smallest depth at which recursiveSum fails."""

    low: int = DEFAULT_START_DEPTH
    high: int = DEFAULT_PROBE_DEPTH
