"""
Ticket Store

Owns the ticket records: persistence through an ITicketStorage port, seat
allocation, PNR generation and lookups. Every operation is a full linear
scan of storage; there is no index.

Storage failures never propagate out of the store. They are logged and
turned into a negative result (False, or an empty read).
"""

from typing import Sequence

from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.ticket_lookup_dto import TicketLookup
from src.service.reservation.app.interface.i_ticket_storage import ITicketStorage
from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.domain.pnr_generator import PnrGenerator


class TicketStore:
    def __init__(
        self,
        *,
        storage: ITicketStorage,
        pnr_generator: PnrGenerator,
        max_seats: int,
    ) -> None:
        self.storage = storage
        self.pnr_generator = pnr_generator
        self.max_seats = max_seats

    # =========================================================================
    # Record I/O
    # =========================================================================

    @Logger.io
    def load_all(self, *, limit: int | None = None) -> list[Ticket]:
        """
        Read every record in storage order, up to ``limit``.

        Missing storage is not an error and yields an empty list. Unreadable
        storage is logged and treated the same way.
        """
        try:
            return self.storage.load(limit=limit)
        except StorageUnavailableError as e:
            Logger.base.error(f'💥 [STORE] Unable to read ticket storage: {e}')
            return []

    @Logger.io
    def save_all(self, tickets: Sequence[Ticket]) -> bool:
        try:
            self.storage.save(tickets)
        except StorageUnavailableError as e:
            Logger.base.error(f'💥 [STORE] Unable to open ticket storage for writing: {e}')
            return False
        return True

    @Logger.io
    def append(self, ticket: Ticket) -> bool:
        try:
            self.storage.append(ticket)
        except StorageUnavailableError as e:
            Logger.base.error(f'💥 [STORE] Unable to open ticket storage for appending: {e}')
            return False
        return True

    @Logger.io
    def cancel_by_identifier(self, pnr: str) -> bool:
        """
        Cancel the first active ticket with this PNR, in place.

        Returns:
            False when no active ticket carries the PNR (absent or already
            cancelled) or the storage cannot be opened. Storage is untouched
            in that case.
        """
        try:
            tickets = self.storage.load()
            for index, ticket in enumerate(tickets):
                if ticket.active and ticket.matches(pnr):
                    self.storage.set_active_at(index, ticket.cancel().active)
                    Logger.base.info(f'🗑️ [STORE] Cancelled {pnr} (seat {ticket.seat_no})')
                    return True
        except StorageUnavailableError as e:
            Logger.base.error(f'💥 [STORE] Unable to cancel {pnr}: {e}')
        return False

    # =========================================================================
    # Seat allocation
    # =========================================================================

    def is_seat_taken(self, seat_no: int) -> bool:
        return any(ticket.holds_seat(seat_no) for ticket in self.load_all())

    @Logger.io
    def next_available_seat(self) -> int | None:
        """
        First-fit ascending: the lowest seat in 1..max_seats with no active
        ticket, or None when every seat is taken.

        One storage scan per candidate seat.
        """
        for seat_no in range(1, self.max_seats + 1):
            if not self.is_seat_taken(seat_no):
                return seat_no
        return None

    @Logger.io
    def generate_identifier(self) -> str:
        return self.pnr_generator.generate()

    # =========================================================================
    # Queries
    # =========================================================================

    @Logger.io
    def count_active(self) -> int:
        return sum(1 for ticket in self.load_all() if ticket.active)

    @Logger.io
    def find_by_identifier(self, pnr: str) -> TicketLookup:
        """First ticket with this PNR, active or not"""
        for ticket in self.load_all():
            if ticket.matches(pnr):
                return TicketLookup.of(ticket)
        return TicketLookup.not_found()

    @Logger.io
    def list_active(self) -> list[Ticket]:
        return [ticket for ticket in self.load_all() if ticket.active]

    @Logger.io
    def storage_exists(self) -> bool:
        return self.storage.exists()
