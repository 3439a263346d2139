"""Reservation Application DTOs"""

from src.service.reservation.app.dto.booking_dto import (
    BookingResult,
    BookTicketRequest,
    parse_int,
)
from src.service.reservation.app.dto.seat_map_dto import SeatMap
from src.service.reservation.app.dto.ticket_lookup_dto import TicketLookup


__all__ = [
    'BookingResult',
    'BookTicketRequest',
    'SeatMap',
    'TicketLookup',
    'parse_int',
]
