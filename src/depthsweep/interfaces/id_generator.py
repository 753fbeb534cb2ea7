"""Interface for run ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a generator of sweep run identifiers."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""
