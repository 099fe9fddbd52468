"""Base persistence interface for DayBook."""

from abc import ABC, abstractmethod
from typing import Optional

from daybook.models import JournalState


class BaseStore(ABC):
    """Abstract base class for journal state storage.

    Implementations persist the whole ``{entries, settings}`` state at
    once. The journal calls ``load`` once at startup and ``save`` after
    every mutation.
    """

    @abstractmethod
    def load(self) -> Optional[JournalState]:
        """Load the persisted state.

        Returns:
            The stored state, or None if nothing has been saved yet.

        Raises:
            StorageError: If the stored state cannot be read or parsed.
        """
        pass

    @abstractmethod
    def save(self, state: JournalState) -> None:
        """Persist the full state, replacing whatever was stored.

        Args:
            state: State to save.

        Raises:
            StorageError: If the state cannot be written.
        """
        pass
