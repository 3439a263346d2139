"""Booking Outcome Enum"""

from enum import StrEnum


class BookingOutcome(StrEnum):
    BOOKED = 'booked'
    NO_SEATS = 'no_seats'
    SAVE_FAILED = 'save_failed'
