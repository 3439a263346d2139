from src.service.reservation.domain.enum.booking_outcome import BookingOutcome
from src.service.reservation.domain.enum.lookup_status import LookupStatus


__all__ = [
    'BookingOutcome',
    'LookupStatus',
]
