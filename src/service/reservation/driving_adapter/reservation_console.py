"""
Reservation Console
Numbered menu over the reservation use cases, rendered with rich
"""

from typing import Callable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.reservation.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.reservation.app.dto.booking_dto import BookTicketRequest, parse_int
from src.service.reservation.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.reservation.app.query.list_active_tickets_use_case import (
    ListActiveTicketsUseCase,
)
from src.service.reservation.app.query.search_ticket_use_case import SearchTicketUseCase
from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.domain.enum.booking_outcome import BookingOutcome
from src.service.reservation.domain.enum.lookup_status import LookupStatus
from src.service.reservation.domain.value_object.bounded_text import (
    PNR_CAPACITY,
    truncate_to_capacity,
)


MENU = (
    '',
    '====== Railway Reservation System ======',
    '1. Book Ticket',
    '2. Cancel Ticket',
    '3. View All Bookings',
    '4. Search by PNR',
    '5. Show Available Seats',
    '0. Exit',
)

EXIT_CHOICE = 0


class ReservationConsole:
    def __init__(
        self,
        *,
        book_ticket_use_case: BookTicketUseCase,
        cancel_ticket_use_case: CancelTicketUseCase,
        list_active_tickets_use_case: ListActiveTicketsUseCase,
        search_ticket_use_case: SearchTicketUseCase,
        get_seat_map_use_case: GetSeatMapUseCase,
        seats_per_row: int,
        console: Console | None = None,
        read_line: Callable[[], str] = input,
    ) -> None:
        self.book_ticket_use_case = book_ticket_use_case
        self.cancel_ticket_use_case = cancel_ticket_use_case
        self.list_active_tickets_use_case = list_active_tickets_use_case
        self.search_ticket_use_case = search_ticket_use_case
        self.get_seat_map_use_case = get_seat_map_use_case
        self.seats_per_row = seats_per_row
        self.console = console if console is not None else Console(highlight=False, emoji=False)
        self.read_line = read_line
        self.actions: dict[int, Callable[[], None]] = {
            1: self.book_ticket,
            2: self.cancel_ticket,
            3: self.view_all_bookings,
            4: self.search_by_pnr,
            5: self.show_seat_map,
        }

    # =========================================================================
    # Menu loop
    # =========================================================================

    def run(self) -> int:
        """
        Show the menu until the user exits.

        Returns:
            Process exit status (always 0)
        """
        Logger.base.info('🚀 [CONSOLE] Menu started')
        try:
            while True:
                self.console.print('\n'.join(MENU))
                raw_choice = self._prompt('Enter choice')
                try:
                    choice = parse_int(raw_choice, field_name='choice')
                except InvalidInputError:
                    self.console.print('Invalid input. Try again.')
                    continue

                if choice == EXIT_CHOICE:
                    self.console.print('Goodbye!')
                    return 0

                action = self.actions.get(choice)
                if action is None:
                    self.console.print('Invalid choice.')
                else:
                    action()
                self._press_enter_to_continue()
        except EOFError:
            Logger.base.info('👋 [CONSOLE] Input closed, leaving menu')
            return 0

    def _prompt(self, label: str) -> str:
        self.console.print(f'{label}: ', end='')
        return self.read_line()

    def _prompt_pnr(self) -> str:
        # Same 31-byte cut the stored PNR gets
        return truncate_to_capacity(self._prompt('Enter PNR'), PNR_CAPACITY)

    def _press_enter_to_continue(self) -> None:
        self.console.print('\nPress Enter to continue...', end='')
        self.read_line()

    def _print_user_text(self, text: str) -> None:
        """Print text holding passenger input, with no markup or :emoji: codes"""
        self.console.print(text, markup=False, emoji=False)

    def _print_ticket(self, ticket: Ticket, *, seat_label: str) -> None:
        self._print_user_text(
            f'PNR: {ticket.pnr}\n'
            f'Name: {ticket.name}\n'
            f'Age: {ticket.age}\n'
            f'Gender: {ticket.gender}\n'
            f'{seat_label}: {ticket.seat_no}'
        )

    # =========================================================================
    # Actions
    # =========================================================================

    def book_ticket(self) -> None:
        self.console.print('\n--- Book Ticket ---')
        name = self._prompt('Passenger name')
        raw_age = self._prompt('Age')
        try:
            age = parse_int(raw_age, field_name='age')
        except InvalidInputError as e:
            self.console.print(e.message)
            return
        gender = self._prompt('Gender (M/F/O)')

        result = self.book_ticket_use_case.execute(
            request=BookTicketRequest(name=name, age=age, gender=gender)
        )

        if result.outcome == BookingOutcome.NO_SEATS:
            self.console.print('Sorry, no seats available.')
        elif result.outcome == BookingOutcome.SAVE_FAILED:
            self.console.print('Failed to save booking.')
        else:
            self.console.print('\nBooking successful!')
            self._print_ticket(result.ticket, seat_label='Seat No')

    def cancel_ticket(self) -> None:
        self.console.print('\n--- Cancel Ticket ---')
        pnr = self._prompt_pnr()

        if not self.cancel_ticket_use_case.has_bookings():
            self.console.print('No bookings found.')
        if self.cancel_ticket_use_case.execute(pnr=pnr):
            self._print_user_text(f'Ticket {pnr} cancelled successfully.')
        else:
            self.console.print('PNR not found or already cancelled.')

    def view_all_bookings(self) -> None:
        tickets = self.list_active_tickets_use_case.execute()
        if tickets is None:
            self.console.print('\nNo bookings found.')
            return

        if not tickets:
            self.console.print('\n--- All Active Bookings ---')
            self.console.print('No active bookings.')
            return

        table = Table(title='--- All Active Bookings ---')
        table.add_column('PNR')
        table.add_column('Name')
        table.add_column('Age', justify='right')
        table.add_column('Gender')
        table.add_column('Seat', justify='right')
        for ticket in tickets:
            table.add_row(
                Text(ticket.pnr),
                Text(ticket.name),
                str(ticket.age),
                Text(ticket.gender),
                str(ticket.seat_no),
            )
        self.console.print(table)

    def search_by_pnr(self) -> None:
        self.console.print('\n--- Search Booking by PNR ---')
        pnr = self._prompt_pnr()

        lookup = self.search_ticket_use_case.execute(pnr=pnr)
        if lookup.status == LookupStatus.ACTIVE:
            self.console.print()
            self._print_ticket(lookup.ticket, seat_label='Seat')
        elif lookup.status == LookupStatus.CANCELLED:
            self._print_user_text(f'PNR {pnr} was cancelled earlier.')
        elif lookup.status == LookupStatus.NO_BOOKINGS:
            self.console.print('No bookings found.')
        else:
            self.console.print('PNR not found.')

    def show_seat_map(self) -> None:
        seat_map = self.get_seat_map_use_case.execute()

        self.console.print('\n--- Seat Map (X = booked, O = available) ---', markup=False)
        for row in seat_map.rows(self.seats_per_row):
            line = ' '.join(f'{seat_no:3d}[{"X" if taken else "O"}]' for seat_no, taken in row)
            self.console.print(line, markup=False)
        self.console.print(
            f'\nTotal seats: {seat_map.total} | Booked: {seat_map.booked} | '
            f'Available: {seat_map.available}'
        )
