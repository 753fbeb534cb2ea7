"""Interface for the diagnostic sink of a depth sweep.

Each successfully compared depth is handed to a `SweepReporter` in ascending
depth order, before the next depth is called.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depthsweep.domain.value_objects import DepthRecord

# pylint: disable=too-few-public-methods


class SweepReporter(abc.ABC):
    """Receives one diagnostic record per compared depth."""

    @abc.abstractmethod
    def report(self, record: DepthRecord) -> None:
        """Emit the diagnostic for a compared depth."""
