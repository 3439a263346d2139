from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.booking_dto import BookingResult, BookTicketRequest
from src.service.reservation.app.ticket_store import TicketStore
from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.domain.enum.booking_outcome import BookingOutcome


class BookTicketUseCase:
    """
    Book one seat for one passenger.

    Flow:
    1. Pick the first free seat (ascending); none left → NO_SEATS
    2. Generate a PNR
    3. Append an active ticket; append fails → SAVE_FAILED

    Nothing is persisted unless step 3 succeeds, so a failed booking leaves
    the seat free.
    """

    def __init__(self, *, ticket_store: TicketStore) -> None:
        self.ticket_store = ticket_store

    @Logger.io
    def execute(self, *, request: BookTicketRequest) -> BookingResult:
        seat_no = self.ticket_store.next_available_seat()
        if seat_no is None:
            Logger.base.warning('🚫 [BOOK] No seats available')
            return BookingResult(outcome=BookingOutcome.NO_SEATS)

        ticket = Ticket.book(
            pnr=self.ticket_store.generate_identifier(),
            name=request.name,
            age=request.age,
            gender=request.gender,
            seat_no=seat_no,
        )

        if not self.ticket_store.append(ticket):
            return BookingResult(outcome=BookingOutcome.SAVE_FAILED)

        Logger.base.info(f'🎫 [BOOK] {ticket.pnr} booked on seat {seat_no}')
        return BookingResult(outcome=BookingOutcome.BOOKED, ticket=ticket)
