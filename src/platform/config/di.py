"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.reservation.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.reservation.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.reservation.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.reservation.app.query.list_active_tickets_use_case import (
    ListActiveTicketsUseCase,
)
from src.service.reservation.app.query.search_ticket_use_case import SearchTicketUseCase
from src.service.reservation.app.ticket_store import TicketStore
from src.service.reservation.domain.pnr_generator import PnrGenerator
from src.service.reservation.driven_adapter.storage.binary_file_ticket_storage import (
    BinaryFileTicketStorage,
)
from src.service.reservation.driving_adapter.reservation_console import ReservationConsole


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Storage (file is opened per call, the adapter itself is stateless)
    ticket_storage = providers.Singleton(
        BinaryFileTicketStorage,
        path=config_service.provided.RESERVATION_DATA_FILE,
    )

    pnr_generator = providers.Singleton(PnrGenerator)

    ticket_store = providers.Singleton(
        TicketStore,
        storage=ticket_storage,
        pnr_generator=pnr_generator,
        max_seats=config_service.provided.MAX_SEATS,
    )

    # Use Cases
    book_ticket_use_case = providers.Factory(BookTicketUseCase, ticket_store=ticket_store)
    cancel_ticket_use_case = providers.Factory(CancelTicketUseCase, ticket_store=ticket_store)
    list_active_tickets_use_case = providers.Factory(
        ListActiveTicketsUseCase, ticket_store=ticket_store
    )
    search_ticket_use_case = providers.Factory(SearchTicketUseCase, ticket_store=ticket_store)
    get_seat_map_use_case = providers.Factory(GetSeatMapUseCase, ticket_store=ticket_store)

    # Console
    reservation_console = providers.Factory(
        ReservationConsole,
        book_ticket_use_case=book_ticket_use_case,
        cancel_ticket_use_case=cancel_ticket_use_case,
        list_active_tickets_use_case=list_active_tickets_use_case,
        search_ticket_use_case=search_ticket_use_case,
        get_seat_map_use_case=get_seat_map_use_case,
        seats_per_row=config_service.provided.SEATS_PER_ROW,
    )


container = Container()
