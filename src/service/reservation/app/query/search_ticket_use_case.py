from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.ticket_lookup_dto import TicketLookup
from src.service.reservation.app.ticket_store import TicketStore


class SearchTicketUseCase:
    def __init__(self, *, ticket_store: TicketStore) -> None:
        self.ticket_store = ticket_store

    @Logger.io
    def execute(self, *, pnr: str) -> TicketLookup:
        if not self.ticket_store.storage_exists():
            return TicketLookup.no_bookings()
        return self.ticket_store.find_by_identifier(pnr)
