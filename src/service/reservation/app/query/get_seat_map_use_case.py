"""
Get Seat Map Use Case
Occupancy of every seat plus booked/available totals
"""

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.seat_map_dto import SeatMap
from src.service.reservation.app.ticket_store import TicketStore


class GetSeatMapUseCase:
    def __init__(self, *, ticket_store: TicketStore) -> None:
        self.ticket_store = ticket_store

    @Logger.io
    def execute(self) -> SeatMap:
        taken = [
            self.ticket_store.is_seat_taken(seat_no)
            for seat_no in range(1, self.ticket_store.max_seats + 1)
        ]
        seat_map = SeatMap(taken=taken, booked=self.ticket_store.count_active())

        Logger.base.info(
            f'📊 [SEAT-MAP] {seat_map.booked}/{seat_map.total} booked, '
            f'{seat_map.available} available'
        )
        return seat_map
