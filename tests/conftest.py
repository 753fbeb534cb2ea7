"""Global pytest fixtures for DEPTHSWEEP."""

from __future__ import annotations

import pytest

from depthsweep.adapters.contracts import GasSchedule, InMemoryContractFactory
from depthsweep.adapters.id_generators import SimpleIdGenerator
from depthsweep.adapters.reporters import CollectingReporter
from tests.helpers.fakes import FakeClock, FakeContractFactory, FakeSumContract

# generous enough to reach the call-depth limit before running out of gas
DEEP_GAS_LIMIT = 10**40


@pytest.fixture
def schedule() -> GasSchedule:
    """The default gas schedule."""
    return GasSchedule()


@pytest.fixture
def deep_schedule() -> GasSchedule:
    """A schedule whose gas limit never binds below the call-depth limit."""
    return GasSchedule(gas_limit=DEEP_GAS_LIMIT)


@pytest.fixture
def memory_factory(schedule: GasSchedule) -> InMemoryContractFactory:
    """In-memory metered contract factory with the default schedule."""
    return InMemoryContractFactory(schedule)


@pytest.fixture
def fake_contract() -> FakeSumContract:
    """A well-behaved recording contract."""
    return FakeSumContract()


@pytest.fixture
def fake_factory(fake_contract: FakeSumContract) -> FakeContractFactory:
    """Factory handing out ``fake_contract``."""
    return FakeContractFactory(fake_contract)


@pytest.fixture
def id_generator() -> SimpleIdGenerator:
    """Deterministic run ids."""
    return SimpleIdGenerator()


@pytest.fixture
def reporter() -> CollectingReporter:
    """Reporter that keeps every diagnostic record."""
    return CollectingReporter()


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock starting at 0."""
    return FakeClock()
