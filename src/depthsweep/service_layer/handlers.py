"""Service layer handlers."""

import logging
import time
from collections.abc import Callable

from depthsweep.domain.sweep import EquivalenceSweep
from depthsweep.domain.value_objects import (
    DepthRange,
    ExhaustionProbeResult,
    ProbeOutcome,
    SweepReport,
)
from depthsweep.interfaces.contract import (
    CallDepthExceededError,
    CallRevertedError,
    ContractError,
    ContractFactory,
    DeploymentError,
    OutOfGasError,
)
from depthsweep.interfaces.id_generator import IdGenerator
from depthsweep.interfaces.reporter import SweepReporter

from . import commands
from .deadline import Deadline
from .errors import SweepTimeoutError

logger = logging.getLogger(__name__)

# ============================================================================
#                           Equivalence Sweep
# ============================================================================


def run_depth_sweep(
    cmd: commands.RunDepthSweep,
    factory: ContractFactory,
    id_generator: IdGenerator,
    reporter: SweepReporter,
    clock: Callable[[], float] = time.monotonic,
) -> SweepReport:
    """Deploy one contract and compare both sums at every depth, fail-fast.

    For each depth in ascending order, ``iterativeSum`` is called first, then
    ``recursiveSum``; the pair is compared for exact equality and, when equal,
    handed to the reporter. The first failure of any kind ends the sweep and
    propagates to the caller.

    Returns:
        SweepReport: The PASSED report.

    Raises:
        InvalidDepthRangeError: If the command's range is invalid.
        DeploymentError: If the contract cannot be deployed.
        ContractError: If a call reverts (including running out of gas).
        EquivalenceMismatchError: At the first depth where the sums differ.
        SweepTimeoutError: If the wall-clock budget is exceeded.
    """

    depths = DepthRange(start=cmd.start_depth, stop=cmd.max_depth)
    deadline = Deadline(cmd.timeout_s, clock=clock)
    sweep = EquivalenceSweep(run_id=id_generator.new_id(), depths=depths)
    logger.info(
        "Sweep %s: depths %d..%d, budget %.1fs",
        sweep.run_id,
        depths.start,
        depths.stop,
        cmd.timeout_s,
    )

    try:
        deadline.check()
        contract = factory.deploy()
    except (DeploymentError, SweepTimeoutError) as e:
        sweep.fail(str(e))
        raise
    sweep.mark_deployed(contract.address)
    logger.debug("Sweep %s: contract at %s", sweep.run_id, contract.address)

    for depth in depths:
        try:
            deadline.check(depth)
            iterative = contract.iterative_sum(depth)
            deadline.check(depth)
            recursive = contract.recursive_sum(depth)
        except (ContractError, SweepTimeoutError) as e:
            sweep.fail(str(e))
            raise
        # marks the sweep FAILED and raises on mismatch
        record = sweep.record(depth, iterative, recursive)
        reporter.report(record)

    report = sweep.snapshot()
    logger.info(
        "Sweep %s passed: %d depths equal in %.2fs",
        sweep.run_id,
        len(report.records),
        deadline.elapsed_s,
    )
    return report


# ============================================================================
#                           Exhaustion Boundary
# ============================================================================


def _classify_revert(error: CallRevertedError) -> ProbeOutcome:
    if isinstance(error, OutOfGasError):
        return ProbeOutcome.OUT_OF_GAS
    if isinstance(error, CallDepthExceededError):
        return ProbeOutcome.CALL_DEPTH_EXCEEDED
    return ProbeOutcome.REVERTED


def probe_exhaustion(
    cmd: commands.ProbeExhaustion, factory: ContractFactory
) -> ExhaustionProbeResult:
    """Call both sums once at ``cmd.depth`` and classify what happened.

    Unlike the sweep, reverts are outcomes here, not failures: running out of
    gas is reported as `ProbeOutcome.OUT_OF_GAS` and is never confused with a
    result mismatch. Deployment failures still propagate.
    """

    depth = cmd.depth
    contract = factory.deploy()
    logger.info("Probing depth %d on contract %s", depth, contract.address)

    try:
        iterative = contract.iterative_sum(depth)
    except CallRevertedError as e:
        logger.warning("iterativeSum(%d) reverted: %s", depth, e.reason)
        return ExhaustionProbeResult(
            depth=depth, outcome=_classify_revert(e), detail=str(e)
        )

    try:
        recursive = contract.recursive_sum(depth)
    except CallRevertedError as e:
        logger.info("recursiveSum(%d) reverted: %s", depth, e.reason)
        return ExhaustionProbeResult(
            depth=depth,
            outcome=_classify_revert(e),
            iterative=iterative,
            detail=str(e),
        )

    outcome = ProbeOutcome.EQUAL if iterative == recursive else ProbeOutcome.MISMATCH
    return ExhaustionProbeResult(
        depth=depth, outcome=outcome, iterative=iterative, recursive=recursive
    )


def find_exhaustion_depth(
    cmd: commands.FindExhaustionDepth, factory: ContractFactory
) -> int | None:
    """Binary-search the smallest depth at which ``recursiveSum`` reverts.

    Failures are assumed monotone in depth: if a depth reverts, every larger
    depth reverts too.

    Returns:
        int | None: The smallest failing depth in ``[cmd.low, cmd.high]``, or
        None when ``cmd.high`` itself succeeds.

    Raises:
        ValueError: If the bounds are not ``0 <= low <= high``.
        DeploymentError: If the contract cannot be deployed.
    """

    if not 0 <= cmd.low <= cmd.high:
        raise ValueError(f"Invalid search bounds {cmd.low}..{cmd.high}")

    contract = factory.deploy()

    def fails(depth: int) -> bool:
        try:
            contract.recursive_sum(depth)
        except CallRevertedError as e:
            logger.debug("recursiveSum(%d) reverted: %s", depth, e.reason)
            return True
        return False

    if not fails(cmd.high):
        logger.info("recursiveSum(%d) succeeded; no limit in range", cmd.high)
        return None

    low, high = cmd.low, cmd.high
    while low < high:
        mid = (low + high) // 2
        if fails(mid):
            high = mid
        else:
            low = mid + 1
    logger.info("recursiveSum first reverts at depth %d", low)
    return low


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., object]] = {
    commands.RunDepthSweep: run_depth_sweep,
    commands.ProbeExhaustion: probe_exhaustion,
    commands.FindExhaustionDepth: find_exhaustion_depth,
}
