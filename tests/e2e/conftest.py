"""Default marks for tests under `tests/e2e/`."""

from pathlib import Path

import pytest

from tests.helpers.markers import add_default_marker

# pylint: disable=unused-argument

E2E_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "e2e"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    add_default_marker(items, E2E_ROOT, MARKER_NAME)
