from src.service.reservation.domain.value_object.bounded_text import (
    GENDER_CAPACITY,
    NAME_CAPACITY,
    PNR_CAPACITY,
    bounded_text,
    truncate_to_capacity,
)


__all__ = [
    'GENDER_CAPACITY',
    'NAME_CAPACITY',
    'PNR_CAPACITY',
    'bounded_text',
    'truncate_to_capacity',
]
