"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from depthsweep.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from depthsweep.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "uuid4", "simple"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"ulid"` → ULIDGenerator
      - `"uuid4"` → UUIDv4Generator
      - `"simple"` → SimpleIdGenerator
    """
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["ulid", "simple"])
def ordered_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield generators whose run ids sort in creation order."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown ordered id generator type: {request.param}")
