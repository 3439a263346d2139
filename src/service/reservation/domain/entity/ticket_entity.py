import attrs

from src.platform.exception.exceptions import DomainError
from src.service.reservation.domain.value_object.bounded_text import (
    GENDER_CAPACITY,
    NAME_CAPACITY,
    PNR_CAPACITY,
    bounded_text,
)


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _validate_int32(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not INT32_MIN <= value <= INT32_MAX:
        raise DomainError(f'Ticket {attribute.name} does not fit a 32-bit record field')


@attrs.define
class Ticket:
    pnr: str = attrs.field(converter=bounded_text(PNR_CAPACITY))
    name: str = attrs.field(converter=bounded_text(NAME_CAPACITY))
    age: int = attrs.field(validator=_validate_int32)
    gender: str = attrs.field(converter=bounded_text(GENDER_CAPACITY))
    seat_no: int = attrs.field(validator=_validate_int32)
    active: bool = attrs.field(default=True, converter=bool)

    @classmethod
    def book(cls, *, pnr: str, name: str, age: int, gender: str, seat_no: int) -> 'Ticket':
        return cls(pnr=pnr, name=name, age=age, gender=gender, seat_no=seat_no, active=True)

    def cancel(self) -> 'Ticket':
        """
        Soft delete: the record stays in storage with the active flag cleared.

        Raises:
            DomainError: When the ticket is already cancelled
        """
        if not self.active:
            raise DomainError('Ticket already cancelled')
        return attrs.evolve(self, active=False)

    def matches(self, pnr: str) -> bool:
        return self.pnr == pnr

    def holds_seat(self, seat_no: int) -> bool:
        return self.active and self.seat_no == seat_no
