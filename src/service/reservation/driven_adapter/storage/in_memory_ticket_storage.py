from typing import Sequence

from src.service.reservation.app.interface.i_ticket_storage import ITicketStorage
from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.driven_adapter.storage import ticket_record_codec
from src.service.reservation.driven_adapter.storage.ticket_record_codec import (
    ACTIVE_OFFSET,
    RECORD_SIZE,
)


class InMemoryTicketStorage(ITicketStorage):
    """
    Ticket storage backed by a bytearray in the record file format.

    Keeps the exact bytes a BinaryFileTicketStorage would write, so callers
    can compare storage contents byte for byte.
    """

    def __init__(self, data: bytes | None = None) -> None:
        self.data: bytearray | None = None if data is None else bytearray(data)

    def load(self, *, limit: int | None = None) -> list[Ticket]:
        if self.data is None:
            return []
        return list(ticket_record_codec.iter_decode(bytes(self.data), limit=limit))

    def save(self, tickets: Sequence[Ticket]) -> None:
        self.data = bytearray(b''.join(ticket_record_codec.encode(t) for t in tickets))

    def append(self, ticket: Ticket) -> None:
        if self.data is None:
            self.data = bytearray()
        self.data += ticket_record_codec.encode(ticket)

    def update_at(self, index: int, ticket: Ticket) -> None:
        if self.data is None:
            self.data = bytearray()
        start = index * RECORD_SIZE
        self.data[start : start + RECORD_SIZE] = ticket_record_codec.encode(ticket)

    def set_active_at(self, index: int, active: bool) -> None:
        if self.data is None:
            self.data = bytearray()
        flag = ticket_record_codec.encode_active(active)
        start = index * RECORD_SIZE + ACTIVE_OFFSET
        self.data[start : start + len(flag)] = flag

    def exists(self) -> bool:
        return self.data is not None

    def snapshot(self) -> bytes:
        return b'' if self.data is None else bytes(self.data)
