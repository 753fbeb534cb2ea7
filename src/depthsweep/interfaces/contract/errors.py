"""Exceptions raised by contract deployment and contract calls."""

# ============================================================================
#                               Base
# ============================================================================


class ContractError(Exception):
    """Base class for deployment and call failures of the contract under test."""


# ============================================================================
#                               Deployment
# ============================================================================


class DeploymentError(ContractError):
    """Raised when the contract could not be deployed.

    Attributes:
        reason (str): Human-readable cause reported by the execution environment.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Contract deployment failed: {reason}.")
        self.reason = reason


# ============================================================================
#                               Calls
# ============================================================================


class InvalidArgumentError(ContractError):
    """Raised when a call argument cannot be encoded for the contract.

    Attributes:
        function (str): Name of the contract entry point.
        value (object): The rejected argument.
    """

    def __init__(self, function: str, value: object) -> None:
        super().__init__(f"Invalid argument for {function}: {value!r}.")
        self.function = function
        self.value = value


class CallRevertedError(ContractError):
    """Raised when a contract call reverts instead of returning a value.

    Attributes:
        function (str): Name of the contract entry point.
        depth (int): The depth argument of the failed call.
        reason (str): Revert reason reported by the execution environment.
    """

    def __init__(self, function: str, depth: int, reason: str) -> None:
        super().__init__(f"Call {function}({depth}) reverted: {reason}.")
        self.function = function
        self.depth = depth
        self.reason = reason


class OutOfGasError(CallRevertedError):
    """Raised when a call consumes its whole gas budget before completing.

    Attributes:
        gas_limit (int): The gas budget the call was given.
    """

    def __init__(self, function: str, depth: int, gas_limit: int) -> None:
        super().__init__(
            function, depth, f"ran out of gas (gas limit {gas_limit})"
        )
        self.gas_limit = gas_limit


class CallDepthExceededError(CallRevertedError):
    """Raised when nested calls exceed the execution environment's call-depth limit.

    Attributes:
        max_call_depth (int): The maximum number of nested frames allowed.
    """

    def __init__(self, function: str, depth: int, max_call_depth: int) -> None:
        super().__init__(
            function, depth, f"call depth limit {max_call_depth} exceeded"
        )
        self.max_call_depth = max_call_depth
