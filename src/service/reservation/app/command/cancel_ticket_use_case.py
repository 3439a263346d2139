from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.ticket_store import TicketStore


class CancelTicketUseCase:
    def __init__(self, *, ticket_store: TicketStore) -> None:
        self.ticket_store = ticket_store

    @Logger.io
    def has_bookings(self) -> bool:
        """False until the first booking creates storage"""
        return self.ticket_store.storage_exists()

    @Logger.io
    def execute(self, *, pnr: str) -> bool:
        """
        Returns:
            True when an active ticket was cancelled; False when the PNR is
            unknown or already cancelled.
        """
        return self.ticket_store.cancel_by_identifier(pnr)
