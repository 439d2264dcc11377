"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class StateStore(ABC):
    """Abstract base class for the session snapshot store.

    The store only ever sees an opaque text blob kept under a single key.
    """

    @abstractmethod
    def load(self) -> str | None:
        """Load the saved blob. Returns None if nothing has been saved."""
        pass

    @abstractmethod
    def save(self, blob: str) -> None:
        """Save the blob, replacing any previous one. Raises on failure."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the saved blob. Raises on failure."""
        pass
