"""DEPTHSWEEP contract interface package"""

from .contract import ITERATIVE_SUM, RECURSIVE_SUM, ContractFactory, SumContract
from .errors import (
    CallDepthExceededError,
    CallRevertedError,
    ContractError,
    DeploymentError,
    InvalidArgumentError,
    OutOfGasError,
)

__all__ = [
    "ITERATIVE_SUM",
    "RECURSIVE_SUM",
    "CallDepthExceededError",
    "CallRevertedError",
    "ContractError",
    "ContractFactory",
    "DeploymentError",
    "InvalidArgumentError",
    "OutOfGasError",
    "SumContract",
]
