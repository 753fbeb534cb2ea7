"""In-memory, gas-metered implementation of the summation contract.

`MeteredRecursionContract` executes ``recursiveSum`` as one nested message
call per depth level and ``iterativeSum`` as a single bounded loop, charging
gas according to a `GasSchedule`. Every call is read-only and starts from a
fresh meter holding the schedule's gas limit.

The recursion is driven by an explicit frame stack and an explicit call-depth
counter, so arbitrarily deep requests fail with `OutOfGasError` or
`CallDepthExceededError` instead of exhausting the Python stack.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

from depthsweep.interfaces.contract import (
    ITERATIVE_SUM,
    RECURSIVE_SUM,
    CallDepthExceededError,
    CallRevertedError,
    ContractFactory,
    DeploymentError,
    InvalidArgumentError,
    OutOfGasError,
    SumContract,
)

from .gas import UINT256_MAX, GasExhausted, GasMeter, GasSchedule

logger = logging.getLogger(__name__)

# Hardhat's first default account.
DEFAULT_DEPLOYER = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"

OVERFLOW_REASON = "arithmetic overflow"


@dataclass
class _Frame:
    """A suspended ``recursiveSum`` frame waiting for its nested call to return."""

    n: int
    meter: GasMeter


def _triangular_overflows(depth: int) -> bool:
    return depth * (depth + 1) // 2 > UINT256_MAX


class MeteredRecursionContract(SumContract):
    """Summation contract running inside the metered in-memory environment."""

    def __init__(self, address: str, schedule: GasSchedule) -> None:
        self._address = address
        self.schedule = schedule
        self.last_gas_used: int | None = None

    @property
    def address(self) -> str:
        return self._address

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self._address!r})"

    # --- entry points ---

    def recursive_sum(self, depth: int) -> int:
        self._check_argument(RECURSIVE_SUM, depth)
        root = GasMeter(self.schedule.gas_limit)
        try:
            result = self._run_recursive(depth, root)
        except GasExhausted as e:
            self.last_gas_used = root.limit
            logger.debug("%s(%d) ran out of gas: %s", RECURSIVE_SUM, depth, e)
            raise OutOfGasError(RECURSIVE_SUM, depth, root.limit) from e
        self.last_gas_used = root.used
        logger.debug("%s(%d) used %d gas", RECURSIVE_SUM, depth, root.used)
        return result

    def iterative_sum(self, depth: int) -> int:
        self._check_argument(ITERATIVE_SUM, depth)
        meter = GasMeter(self.schedule.gas_limit)
        try:
            meter.charge(self.schedule.frame_cost)
            # The loop is bounded by its argument; its cost is known up front.
            meter.charge(depth * self.schedule.step_cost)
        except GasExhausted as e:
            self.last_gas_used = meter.limit
            logger.debug("%s(%d) ran out of gas: %s", ITERATIVE_SUM, depth, e)
            raise OutOfGasError(ITERATIVE_SUM, depth, meter.limit) from e

        # uint256 checked arithmetic: the final sum is the largest partial sum
        if _triangular_overflows(depth):
            self.last_gas_used = meter.used
            logger.debug("%s(%d) reverted: %s", ITERATIVE_SUM, depth, OVERFLOW_REASON)
            raise CallRevertedError(ITERATIVE_SUM, depth, OVERFLOW_REASON)

        total = 0
        for i in range(1, depth + 1):
            total += i
        self.last_gas_used = meter.used
        logger.debug("%s(%d) used %d gas", ITERATIVE_SUM, depth, meter.used)
        return total

    # --- execution ---

    def _run_recursive(self, depth: int, root: GasMeter) -> int:
        schedule = self.schedule
        frames: list[_Frame] = []
        meter = root
        n = depth

        # descend: each level starts a frame and calls into the next one
        while True:
            meter.charge(schedule.frame_cost)
            if n == 0:
                break
            if len(frames) >= schedule.max_call_depth:
                raise CallDepthExceededError(
                    RECURSIVE_SUM, depth, schedule.max_call_depth
                )
            meter.charge(schedule.call_cost)
            child = meter.fork(schedule.forward_numerator, schedule.forward_denominator)
            frames.append(_Frame(n=n, meter=meter))
            meter = child
            n -= 1

        # unwind: every suspended frame adds its own level to the callee's result
        result = 0
        while frames:
            frame = frames.pop()
            frame.meter.settle(meter)
            meter = frame.meter
            meter.charge(schedule.step_cost)
            result += frame.n
        return result

    @staticmethod
    def _check_argument(function: str, depth: object) -> None:
        if not isinstance(depth, int) or isinstance(depth, bool):
            raise InvalidArgumentError(function, depth)
        if not 0 <= depth <= UINT256_MAX:
            raise InvalidArgumentError(function, depth)


class InMemoryContractFactory(ContractFactory):
    """Deploys `MeteredRecursionContract` instances into the in-memory environment.

    Addresses are derived from the deployer address and a per-factory nonce,
    so a given factory always deploys to the same sequence of addresses.

    Note: This implementation is not thread-safe; the sweep is sequential.
    """

    def __init__(
        self,
        schedule: GasSchedule | None = None,
        deployer: str = DEFAULT_DEPLOYER,
    ) -> None:
        self.schedule = schedule or GasSchedule()
        self.deployer = deployer
        self.nonce = 0

    def deploy(self) -> MeteredRecursionContract:
        if self.schedule.deploy_cost > self.schedule.gas_limit:
            raise DeploymentError(
                f"deployment needs {self.schedule.deploy_cost} gas but the "
                f"gas limit is {self.schedule.gas_limit}"
            )
        address = self._contract_address(self.nonce)
        self.nonce += 1
        logger.info("Deployed RecursionContract at %s", address)
        return MeteredRecursionContract(address, self.schedule)

    def _contract_address(self, nonce: int) -> str:
        digest = hashlib.sha256(f"{self.deployer}:{nonce}".encode("ascii")).hexdigest()
        return "0x" + digest[-40:]
