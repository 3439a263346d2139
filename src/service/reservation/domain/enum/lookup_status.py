"""Ticket Lookup Status Enum"""

from enum import StrEnum


class LookupStatus(StrEnum):
    ACTIVE = 'active'
    CANCELLED = 'cancelled'
    NOT_FOUND = 'not_found'
    NO_BOOKINGS = 'no_bookings'  # storage not created yet
