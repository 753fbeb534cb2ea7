"""Default marks for tests under `tests/contract/`."""

from pathlib import Path

import pytest

from tests.helpers.markers import add_default_marker

# pylint: disable=unused-argument

CONTRACT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "contract"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `contract` marks to items in `tests/contract/`."""
    add_default_marker(items, CONTRACT_ROOT, MARKER_NAME)
