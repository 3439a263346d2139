"""
Booking DTOs

Request/Result DTOs for the book ticket use case.
"""

import re

import attrs

from src.platform.exception.exceptions import InvalidInputError
from src.service.reservation.domain.entity.ticket_entity import INT32_MAX, INT32_MIN, Ticket
from src.service.reservation.domain.enum.booking_outcome import BookingOutcome


# Leading whitespace, optional sign, digits; trailing text is ignored
_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def parse_int(raw: str, *, field_name: str) -> int:
    """
    Parse the leading integer of ``raw``.

    Raises:
        InvalidInputError: When ``raw`` does not start with an integer or it
            does not fit a 32-bit field
    """
    match = _LEADING_INT.match(raw)
    if not match:
        raise InvalidInputError(f'Invalid {field_name} input.')
    value = int(match.group(1))
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidInputError(f'Invalid {field_name} input.')
    return value


@attrs.define
class BookTicketRequest:
    name: str
    age: int
    gender: str


@attrs.define
class BookingResult:
    outcome: BookingOutcome
    ticket: Ticket | None = None

    @property
    def booked(self) -> bool:
        return self.outcome == BookingOutcome.BOOKED
