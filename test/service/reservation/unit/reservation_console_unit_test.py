"""
Unit tests for ReservationConsole

Drives the menu with scripted input lines and asserts on rendered text.
"""

from collections.abc import Callable, Iterable
import io

import pytest
from rich.console import Console

from src.service.reservation.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.reservation.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.reservation.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.reservation.app.query.list_active_tickets_use_case import (
    ListActiveTicketsUseCase,
)
from src.service.reservation.app.query.search_ticket_use_case import SearchTicketUseCase
from src.service.reservation.app.ticket_store import TicketStore
from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.driving_adapter.reservation_console import ReservationConsole
from test.constants import FIXED_PNR_PREFIX


def _scripted(lines: Iterable[str]) -> Callable[[], str]:
    """input() stand-in: returns lines in order, then EOFError"""
    remaining = iter(lines)

    def read_line() -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line


class ConsoleHarness:
    def __init__(self, ticket_store: TicketStore, *, seats_per_row: int = 10) -> None:
        self.ticket_store = ticket_store
        self.seats_per_row = seats_per_row
        self.buffer = io.StringIO()

    def run(self, *lines: str) -> tuple[int, str]:
        console = ReservationConsole(
            book_ticket_use_case=BookTicketUseCase(ticket_store=self.ticket_store),
            cancel_ticket_use_case=CancelTicketUseCase(ticket_store=self.ticket_store),
            list_active_tickets_use_case=ListActiveTicketsUseCase(ticket_store=self.ticket_store),
            search_ticket_use_case=SearchTicketUseCase(ticket_store=self.ticket_store),
            get_seat_map_use_case=GetSeatMapUseCase(ticket_store=self.ticket_store),
            seats_per_row=self.seats_per_row,
            console=Console(file=self.buffer, width=120, highlight=False, color_system=None),
            read_line=_scripted(lines),
        )
        status = console.run()
        return status, self.buffer.getvalue()


@pytest.fixture
def harness(ticket_store: TicketStore) -> ConsoleHarness:
    return ConsoleHarness(ticket_store)


@pytest.mark.unit
class TestMenuLoop:
    def test_exit_prints_goodbye_and_returns_zero(self, harness: ConsoleHarness) -> None:
        status, output = harness.run('0')

        assert status == 0
        assert '====== Railway Reservation System ======' in output
        assert '5. Show Available Seats' in output
        assert output.rstrip().endswith('Goodbye!')

    def test_end_of_input_leaves_loop_with_success(self, harness: ConsoleHarness) -> None:
        status, _ = harness.run()

        assert status == 0

    def test_non_numeric_choice_reprompts_without_pause(self, harness: ConsoleHarness) -> None:
        _, output = harness.run('abc', '0')

        assert 'Invalid input. Try again.' in output
        assert 'Press Enter to continue...' not in output
        assert output.count('====== Railway Reservation System ======') == 2

    def test_blank_choice_is_invalid_input(self, harness: ConsoleHarness) -> None:
        _, output = harness.run('', '0')

        assert 'Invalid input. Try again.' in output
        assert output.rstrip().endswith('Goodbye!')

    def test_unknown_choice_pauses(self, harness: ConsoleHarness) -> None:
        _, output = harness.run('9', '', '0')

        assert 'Invalid choice.' in output
        assert 'Press Enter to continue...' in output


@pytest.mark.unit
class TestBookAndCancel:
    def test_book_ticket(self, harness: ConsoleHarness, ticket_store: TicketStore) -> None:
        _, output = harness.run('1', 'Asha Rao', '34', 'F', '', '0')

        assert 'Booking successful!' in output
        assert f'PNR: {FIXED_PNR_PREFIX}0000' in output
        assert 'Name: Asha Rao' in output
        assert 'Seat No: 1' in output
        assert ticket_store.count_active() == 1

    def test_invalid_age_aborts_before_gender_prompt(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        _, output = harness.run('1', 'Asha Rao', 'thirty', '', '0')

        assert 'Invalid age input.' in output
        assert 'Gender (M/F/O)' not in output
        assert ticket_store.load_all() == []

    def test_book_when_full(self, make_ticket_store: Callable[..., TicketStore]) -> None:
        store = make_ticket_store(max_seats=1)
        store.append(Ticket(pnr='PNR-A', name='A', age=1, gender='M', seat_no=1))

        _, output = ConsoleHarness(store).run('1', 'B', '2', 'F', '', '0')

        assert 'Sorry, no seats available.' in output

    def test_book_when_save_fails(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        ticket_store.append = lambda ticket: False  # type: ignore[method-assign]

        _, output = harness.run('1', 'B', '2', 'F', '', '0')

        assert 'Failed to save booking.' in output

    def test_cancel_ticket(self, harness: ConsoleHarness) -> None:
        pnr = f'{FIXED_PNR_PREFIX}0000'

        _, output = harness.run('1', 'Asha', '34', 'F', '', '2', pnr, '', '0')

        assert f'Ticket {pnr} cancelled successfully.' in output

    def test_cancel_unknown(self, harness: ConsoleHarness, ticket_store: TicketStore) -> None:
        ticket_store.append(Ticket(pnr='PNR-A', name='A', age=1, gender='M', seat_no=1))

        _, output = harness.run('2', 'PNR-NOPE', '', '0')

        assert 'PNR not found or already cancelled.' in output
        assert 'No bookings found.' not in output

    def test_cancel_without_storage(self, harness: ConsoleHarness) -> None:
        _, output = harness.run('2', 'PNR-NOPE', '', '0')

        assert 'No bookings found.\nPNR not found or already cancelled.' in output

    def test_cancel_matches_pnr_cut_to_stored_width(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        long_pnr = 'P' * 31
        ticket_store.append(Ticket(pnr=long_pnr, name='A', age=1, gender='M', seat_no=1))

        _, output = harness.run('2', long_pnr + 'EXTRA', '', '0')

        assert f'Ticket {long_pnr} cancelled successfully.' in output
        assert ticket_store.count_active() == 0


@pytest.mark.unit
class TestViews:
    def test_view_all_without_storage(self, harness: ConsoleHarness) -> None:
        _, output = harness.run('3', '', '0')

        assert 'No bookings found.' in output

    def test_view_all_with_only_cancelled(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        ticket_store.append(
            Ticket(pnr='PNR-A', name='A', age=1, gender='M', seat_no=1, active=False)
        )

        _, output = harness.run('3', '', '0')

        assert 'No active bookings.' in output

    def test_view_all_lists_active_tickets(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        ticket_store.append(Ticket(pnr='PNR-A', name='[bold]Asha', age=34, gender='F', seat_no=1))
        ticket_store.append(
            Ticket(pnr='PNR-B', name='Ravi', age=40, gender='M', seat_no=2, active=False)
        )

        _, output = harness.run('3', '', '0')

        assert 'All Active Bookings' in output
        assert 'PNR-A' in output
        assert '[bold]Asha' in output
        assert 'PNR-B' not in output

    def test_search_active(self, harness: ConsoleHarness, ticket_store: TicketStore) -> None:
        ticket_store.append(Ticket(pnr='PNR-A', name='Asha', age=34, gender='F', seat_no=7))

        _, output = harness.run('4', 'PNR-A', '', '0')

        assert 'Name: Asha' in output
        assert 'Seat: 7' in output
        assert 'Seat No' not in output

    def test_search_cancelled(self, harness: ConsoleHarness, ticket_store: TicketStore) -> None:
        ticket_store.append(
            Ticket(pnr='PNR-A', name='Asha', age=34, gender='F', seat_no=7, active=False)
        )

        _, output = harness.run('4', 'PNR-A', '', '0')

        assert 'PNR PNR-A was cancelled earlier.' in output
        assert 'Name: Asha' not in output

    def test_search_unknown(self, harness: ConsoleHarness, ticket_store: TicketStore) -> None:
        ticket_store.append(Ticket(pnr='PNR-A', name='A', age=1, gender='M', seat_no=1))

        _, output = harness.run('4', 'PNR-NOPE', '', '0')

        assert 'PNR not found.' in output

    def test_search_without_storage(self, harness: ConsoleHarness) -> None:
        _, output = harness.run('4', 'PNR-NOPE', '', '0')

        assert 'No bookings found.' in output
        assert 'PNR not found.' not in output

    def test_search_matches_pnr_cut_to_stored_width(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        long_pnr = 'Q' * 31
        ticket_store.append(Ticket(pnr=long_pnr, name='Asha', age=34, gender='F', seat_no=3))

        _, output = harness.run('4', long_pnr + 'QQQQ', '', '0')

        assert 'Name: Asha' in output

    def test_seat_map(self, ticket_store: TicketStore) -> None:
        ticket_store.append(Ticket(pnr='PNR-A', name='A', age=1, gender='M', seat_no=2))

        _, output = ConsoleHarness(ticket_store, seats_per_row=3).run('5', '', '0')

        assert '  1[O]   2[X]   3[O]' in output
        assert '  4[O]   5[O]' in output
        assert 'Total seats: 5 | Booked: 1 | Available: 4' in output


@pytest.mark.unit
class TestPassengerTextRenderedVerbatim:
    def test_emoji_code_in_name_kept_on_booking_and_search(
        self, harness: ConsoleHarness
    ) -> None:
        pnr = f'{FIXED_PNR_PREFIX}0000'

        _, output = harness.run('1', 'Mr :smile: X', '40', 'M', '', '4', pnr, '', '0')

        assert output.count('Name: Mr :smile: X') == 2
        assert '\U0001f604' not in output

    def test_emoji_code_and_markup_in_table(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        ticket_store.append(
            Ticket(pnr='PNR-A', name='[red]Mr :smile: X', age=40, gender='M', seat_no=1)
        )

        _, output = harness.run('3', '', '0')

        assert '[red]Mr :smile: X' in output
        assert '\U0001f604' not in output

    def test_cancel_message_keeps_emoji_code_in_pnr(
        self, harness: ConsoleHarness, ticket_store: TicketStore
    ) -> None:
        ticket_store.append(Ticket(pnr='PNR:smile:', name='A', age=1, gender='M', seat_no=1))

        _, output = harness.run('2', 'PNR:smile:', '', '4', 'PNR:smile:', '', '0')

        assert 'Ticket PNR:smile: cancelled successfully.' in output
        assert 'PNR PNR:smile: was cancelled earlier.' in output
