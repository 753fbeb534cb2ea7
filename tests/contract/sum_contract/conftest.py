"""Fixtures for SumContract contract tests."""

from collections.abc import Iterable

import pytest

from depthsweep.adapters.contracts import GasSchedule, InMemoryContractFactory
from depthsweep.interfaces.contract import ContractFactory, SumContract
from tests.conftest import DEEP_GAS_LIMIT


@pytest.fixture(params=["metered", "deep"])
def contract_factory(request: pytest.FixtureRequest) -> Iterable[ContractFactory]:
    """Return a fresh ContractFactory for the requested environment.

    Supported params:
      - `"metered"` → in-memory environment with the default gas schedule
      - `"deep"` → in-memory environment whose gas limit never binds before
        the call-depth limit
    """
    match request.param:
        case "metered":
            yield InMemoryContractFactory(GasSchedule())
        case "deep":
            yield InMemoryContractFactory(GasSchedule(gas_limit=DEEP_GAS_LIMIT))
        case _:
            raise ValueError(f"unknown contract environment: {request.param}")


@pytest.fixture
def sum_contract(contract_factory: ContractFactory) -> SumContract:
    """A freshly deployed contract."""
    return contract_factory.deploy()
