from pathlib import Path
from typing import Sequence

from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_ticket_storage import ITicketStorage
from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.driven_adapter.storage import ticket_record_codec
from src.service.reservation.driven_adapter.storage.ticket_record_codec import (
    ACTIVE_OFFSET,
    RECORD_SIZE,
)


class BinaryFileTicketStorage(ITicketStorage):
    """
    Ticket records in a flat file of fixed-size binary records.

    The file is opened and closed around every call. No locking: a second
    process writing the same file is unsupported.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    @Logger.io
    def load(self, *, limit: int | None = None) -> list[Ticket]:
        tickets: list[Ticket] = []
        try:
            with self.path.open('rb') as f:
                while limit is None or len(tickets) < limit:
                    record = f.read(RECORD_SIZE)
                    if len(record) < RECORD_SIZE:
                        break  # EOF or partial trailing record
                    tickets.append(ticket_record_codec.decode(record))
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageUnavailableError(f'Unable to read {self.path}: {e}') from e
        return tickets

    @Logger.io
    def save(self, tickets: Sequence[Ticket]) -> None:
        data = b''.join(ticket_record_codec.encode(ticket) for ticket in tickets)
        try:
            with self.path.open('wb') as f:
                f.write(data)
        except OSError as e:
            raise StorageUnavailableError(f'Unable to open {self.path} for writing: {e}') from e

    @Logger.io
    def append(self, ticket: Ticket) -> None:
        try:
            with self.path.open('ab') as f:
                f.write(ticket_record_codec.encode(ticket))
        except OSError as e:
            raise StorageUnavailableError(f'Unable to open {self.path} for appending: {e}') from e

    @Logger.io
    def update_at(self, index: int, ticket: Ticket) -> None:
        try:
            with self.path.open('r+b') as f:
                f.seek(index * RECORD_SIZE)
                f.write(ticket_record_codec.encode(ticket))
        except OSError as e:
            raise StorageUnavailableError(f'Unable to open {self.path} for update: {e}') from e

    @Logger.io
    def set_active_at(self, index: int, active: bool) -> None:
        try:
            with self.path.open('r+b') as f:
                f.seek(index * RECORD_SIZE + ACTIVE_OFFSET)
                f.write(ticket_record_codec.encode_active(active))
        except OSError as e:
            raise StorageUnavailableError(f'Unable to open {self.path} for update: {e}') from e

    def exists(self) -> bool:
        return self.path.is_file()
