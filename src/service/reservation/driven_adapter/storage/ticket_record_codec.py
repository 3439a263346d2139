"""
Ticket Record Codec

Fixed-layout binary record, 108 bytes, little-endian, C struct alignment:

    offset  size  field
    0       32    pnr      (NUL-padded)
    32      50    name     (NUL-padded)
    82      2     padding
    84      4     age      (int32)
    88      10    gender   (NUL-padded)
    98      2     padding
    100     4     seat_no  (int32)
    104     4     active   (int32, nonzero = booked)

No header, version or checksum.
"""

import struct
from typing import Iterator

from src.service.reservation.domain.entity.ticket_entity import Ticket
from src.service.reservation.domain.value_object.bounded_text import ENCODING


_RECORD = struct.Struct('<32s50s2xi10s2xii')
_ACTIVE = struct.Struct('<i')

RECORD_SIZE = _RECORD.size
ACTIVE_OFFSET = RECORD_SIZE - _ACTIVE.size


def _decode_text(raw: bytes) -> str:
    return raw.split(b'\0', 1)[0].decode(ENCODING, errors='replace')


def encode(ticket: Ticket) -> bytes:
    # struct pads short fields with NULs; Ticket already truncated them to capacity
    return _RECORD.pack(
        ticket.pnr.encode(ENCODING),
        ticket.name.encode(ENCODING),
        ticket.age,
        ticket.gender.encode(ENCODING),
        ticket.seat_no,
        1 if ticket.active else 0,
    )


def encode_active(active: bool) -> bytes:
    """The active flag alone, for patching bytes ACTIVE_OFFSET.. of a record"""
    return _ACTIVE.pack(1 if active else 0)


def decode(record: bytes) -> Ticket:
    pnr, name, age, gender, seat_no, active = _RECORD.unpack(record)
    return Ticket(
        pnr=_decode_text(pnr),
        name=_decode_text(name),
        age=age,
        gender=_decode_text(gender),
        seat_no=seat_no,
        active=active != 0,
    )


def iter_decode(data: bytes, *, limit: int | None = None) -> Iterator[Ticket]:
    """Decode consecutive records; a short trailing record is ignored"""
    count = len(data) // RECORD_SIZE
    if limit is not None:
        count = min(count, limit)
    for i in range(count):
        yield decode(data[i * RECORD_SIZE : (i + 1) * RECORD_SIZE])
