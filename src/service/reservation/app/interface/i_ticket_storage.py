from abc import ABC, abstractmethod
from typing import Sequence

from src.service.reservation.domain.entity.ticket_entity import Ticket


class ITicketStorage(ABC):
    """
    Storage port for fixed-size ticket records.

    Records keep their position once written, so ``update_at`` can rewrite a
    record in place. Every call opens and closes the backing store; nothing
    is held between calls.

    Implementations raise StorageUnavailableError when the backing store
    cannot be opened, read or written.
    """

    @abstractmethod
    def load(self, *, limit: int | None = None) -> list[Ticket]:
        """
        Read records in storage order.

        Args:
            limit: Maximum number of records to return (None = all)

        Returns:
            Tickets in storage order; empty when the storage does not exist yet.
            A short trailing record is ignored.
        """
        pass

    @abstractmethod
    def save(self, tickets: Sequence[Ticket]) -> None:
        """Replace the whole storage with ``tickets``, in order"""
        pass

    @abstractmethod
    def append(self, ticket: Ticket) -> None:
        pass

    @abstractmethod
    def update_at(self, index: int, ticket: Ticket) -> None:
        """Overwrite the record at position ``index``"""
        pass

    @abstractmethod
    def set_active_at(self, index: int, active: bool) -> None:
        """
        Rewrite only the active flag of the record at position ``index``.

        Every other byte of the record is left as stored, including text that
        does not decode cleanly.
        """
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Whether anything has been written yet"""
        pass
