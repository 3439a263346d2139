"""
Bounded Text

Ticket text fields live in fixed-width, NUL-terminated slots of the record
file. Capacities below are usable bytes (slot size minus the terminator).
Oversized input is truncated silently.
"""

from typing import Callable


PNR_CAPACITY = 31
NAME_CAPACITY = 49
GENDER_CAPACITY = 9

ENCODING = 'utf-8'


def truncate_to_capacity(text: str, capacity: int) -> str:
    """
    Truncate text so its UTF-8 encoding fits in ``capacity`` bytes.

    A multi-byte character cut by the limit is dropped whole. Anything after
    an embedded NUL is dropped too, since the record reader stops there.
    """
    text = text.split('\0', 1)[0]
    encoded = text.encode(ENCODING)
    if len(encoded) <= capacity:
        return text
    return encoded[:capacity].decode(ENCODING, errors='ignore')


def bounded_text(capacity: int) -> Callable[[object], str]:
    """attrs converter for a text field stored in a ``capacity``-byte slot"""

    def convert(value: object) -> str:
        return truncate_to_capacity('' if value is None else str(value), capacity)

    return convert
