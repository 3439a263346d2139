from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.ticket_store import TicketStore
from src.service.reservation.domain.entity.ticket_entity import Ticket


class ListActiveTicketsUseCase:
    """Active tickets in storage order; None when nothing was ever booked"""

    def __init__(self, *, ticket_store: TicketStore) -> None:
        self.ticket_store = ticket_store

    @Logger.io
    def execute(self) -> list[Ticket] | None:
        if not self.ticket_store.storage_exists():
            return None
        return self.ticket_store.list_active()
