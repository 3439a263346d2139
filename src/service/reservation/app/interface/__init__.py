"""Reservation Service Interfaces"""

from src.service.reservation.app.interface.i_ticket_storage import ITicketStorage


__all__ = [
    'ITicketStorage',
]
