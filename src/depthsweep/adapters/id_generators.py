"""Run ID generators for DEPTHSWEEP."""

import threading
import uuid

from ulid import monotonic

from depthsweep.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Monotonic ULID run ids, safe to share between threads.

    ULIDs sort by creation time, so run IDs of consecutive sweeps line up with
    the order of their entries in the flight-recorder log.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Return the next ULID; generation is serialized by a lock."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUID4 run ids.

    Random identifiers with no ordering; useful when run IDs are merged from
    several machines.
    """

    def new_id(self) -> str:
        """Return a fresh random UUID4 string."""
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Sequential run IDs (``run-000001``, ``run-000002``, ...).

    Note:
        Predictable and process-local; meant for tests and demos.
    """

    def __init__(self, prefix: str = "run", width: int = 6) -> None:
        self._counter = 0
        self._prefix = prefix
        self._width = width

    def new_id(self) -> str:
        """Generate the next sequential identifier."""
        self._counter += 1
        return f"{self._prefix}-{self._counter:0{self._width}d}"
