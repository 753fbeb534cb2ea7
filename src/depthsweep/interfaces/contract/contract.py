"""Interfaces for the contract under test and the factory that deploys it.

A `SumContract` exposes two read-only entry points computing the same
summation: one by recursing once per depth level, one with a single loop.
Both are blocking request/response calls into an execution environment.
"""

from __future__ import annotations

import abc

RECURSIVE_SUM = "recursiveSum"
ITERATIVE_SUM = "iterativeSum"


class SumContract(abc.ABC):
    """Handle to a deployed contract exposing recursive and iterative sums."""

    @property
    @abc.abstractmethod
    def address(self) -> str:
        """The address the contract was deployed at (``0x`` + 40 hex digits)."""

    @abc.abstractmethod
    def recursive_sum(self, depth: int) -> int:
        """Call ``recursiveSum(depth)`` and return its result.

        Args:
            depth: Number of recursion levels; must be a non-negative integer.

        Returns:
            int: The value computed by the recursive entry point.

        Raises:
            InvalidArgumentError: If ``depth`` cannot be passed to the contract.
            OutOfGasError: If the call exhausts its gas budget.
            CallDepthExceededError: If nested calls exceed the call-depth limit.
            CallRevertedError: If the call reverts for any other reason.
        """

    @abc.abstractmethod
    def iterative_sum(self, depth: int) -> int:
        """Call ``iterativeSum(depth)`` and return its result.

        Args:
            depth: Number of loop iterations; must be a non-negative integer.

        Returns:
            int: The value computed by the iterative entry point.

        Raises:
            InvalidArgumentError: If ``depth`` cannot be passed to the contract.
            OutOfGasError: If the call exhausts its gas budget.
            CallRevertedError: If the call reverts for any other reason.
        """


class ContractFactory(abc.ABC):
    """Deploys fresh instances of the contract under test."""

    @abc.abstractmethod
    def deploy(self) -> SumContract:
        """Deploy a new contract instance and wait until it is usable.

        Returns:
            SumContract: Handle to the deployed instance.

        Raises:
            DeploymentError: If deployment fails. Deployment is never retried.
        """
