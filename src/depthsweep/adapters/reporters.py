"""Diagnostic reporters for depth sweeps."""

import logging

from depthsweep.domain.value_objects import DepthRecord
from depthsweep.interfaces.reporter import SweepReporter

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

DIAGNOSTIC_FORMAT = "depth: %d\t sum = %d"


def format_record(record: DepthRecord) -> str:
    """Render the diagnostic line for a compared depth."""
    return DIAGNOSTIC_FORMAT % (record.depth, record.recursive)


class LoggingReporter(SweepReporter):
    """Emit each record as an INFO line on the ``depthsweep`` logger tree."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def report(self, record: DepthRecord) -> None:
        logger.log(self.level, DIAGNOSTIC_FORMAT, record.depth, record.recursive)


class CollectingReporter(SweepReporter):
    """Keep every reported record in memory, in report order."""

    def __init__(self) -> None:
        self.records: list[DepthRecord] = []

    def report(self, record: DepthRecord) -> None:
        self.records.append(record)


class FanOutReporter(SweepReporter):
    """Forward each record to several reporters in order."""

    def __init__(self, *reporters: SweepReporter) -> None:
        self.reporters = reporters

    def report(self, record: DepthRecord) -> None:
        for reporter in self.reporters:
            reporter.report(record)
