"""In-memory execution environment for the contract under test."""

from .gas import GasExhausted, GasMeter, GasSchedule
from .memory import InMemoryContractFactory, MeteredRecursionContract

__all__ = [
    "GasExhausted",
    "GasMeter",
    "GasSchedule",
    "InMemoryContractFactory",
    "MeteredRecursionContract",
]
