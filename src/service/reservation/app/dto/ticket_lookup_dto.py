import attrs

from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.domain.enum.lookup_status import LookupStatus


@attrs.define
class TicketLookup:
    """Result of a search by PNR"""

    status: LookupStatus
    ticket: Ticket | None = None

    @classmethod
    def not_found(cls) -> 'TicketLookup':
        return cls(status=LookupStatus.NOT_FOUND)

    @classmethod
    def no_bookings(cls) -> 'TicketLookup':
        return cls(status=LookupStatus.NO_BOOKINGS)

    @classmethod
    def of(cls, ticket: Ticket) -> 'TicketLookup':
        status = LookupStatus.ACTIVE if ticket.active else LookupStatus.CANCELLED
        return cls(status=status, ticket=ticket)

    @property
    def found(self) -> bool:
        return self.ticket is not None
