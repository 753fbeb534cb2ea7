"""Gas accounting for the in-memory execution environment.

`GasSchedule` holds the prices and limits of the environment; `GasMeter`
tracks the budget of one call frame. Nested frames receive a forwarded
share of their parent's remaining gas (all but 1/64 by default) and refund
what they did not use when they return.
"""

from __future__ import annotations

from dataclasses import dataclass

from depthsweep.config import DEFAULT_GAS_LIMIT, DEFAULT_MAX_CALL_DEPTH

UINT256_MAX = 2**256 - 1


class GasExhausted(Exception):
    """Signal raised by `GasMeter.charge` when a frame's budget runs out.

    Internal to the execution environment; contracts translate it into
    `OutOfGasError` with the call's function name and argument.
    """

    def __init__(self, requested: int, remaining: int) -> None:
        super().__init__(f"requested {requested} gas with {remaining} remaining")
        self.requested = requested
        self.remaining = remaining


@dataclass(frozen=True)
class GasSchedule:  # pylint: disable=too-many-instance-attributes
    """Prices and limits of the metered execution environment.

    Attributes:
        gas_limit: Budget of each top-level call.
        deploy_cost: Gas charged against ``gas_limit`` to deploy a contract.
        call_cost: Gas charged by a frame for each nested call it makes.
        frame_cost: Gas charged when a frame starts executing.
        step_cost: Gas charged per arithmetic step or loop iteration.
        forward_numerator: Numerator of the share of remaining gas forwarded
            to a nested call.
        forward_denominator: Denominator of that share.
        max_call_depth: Maximum number of nested frames below the top-level call.
    """

    gas_limit: int = DEFAULT_GAS_LIMIT
    deploy_cost: int = 200_000
    call_cost: int = 700
    frame_cost: int = 100
    step_cost: int = 8
    forward_numerator: int = 63
    forward_denominator: int = 64
    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH

    def __post_init__(self) -> None:
        if self.gas_limit < 0:
            raise ValueError(f"gas_limit must be non-negative, got {self.gas_limit}")
        if self.max_call_depth < 0:
            raise ValueError(
                f"max_call_depth must be non-negative, got {self.max_call_depth}"
            )
        if not 0 < self.forward_numerator <= self.forward_denominator:
            raise ValueError(
                "forward ratio must satisfy 0 < numerator <= denominator, got "
                f"{self.forward_numerator}/{self.forward_denominator}"
            )


class GasMeter:
    """Gas budget of a single call frame."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.used = 0

    @property
    def remaining(self) -> int:
        """Gas still available to this frame."""
        return self.limit - self.used

    def charge(self, amount: int) -> None:
        """Consume ``amount`` gas.

        Raises:
            GasExhausted: If less than ``amount`` gas remains. The frame's whole
                budget is consumed.
        """
        if amount > self.remaining:
            remaining = self.remaining
            self.used = self.limit
            raise GasExhausted(amount, remaining)
        self.used += amount

    def fork(self, numerator: int, denominator: int) -> GasMeter:
        """Reserve a share of the remaining gas and return a meter for a nested frame."""
        forwarded = self.remaining * numerator // denominator
        self.used += forwarded
        return GasMeter(forwarded)

    def settle(self, child: GasMeter) -> None:
        """Refund the gas a returning nested frame did not use."""
        self.used -= child.remaining
