import attrs


@attrs.define
class SeatMap:
    """Per-seat occupancy for seats 1..total, plus booking counts"""

    taken: list[bool]  # index 0 is seat 1
    booked: int

    @property
    def total(self) -> int:
        return len(self.taken)

    @property
    def available(self) -> int:
        return self.total - self.booked

    def rows(self, seats_per_row: int) -> list[list[tuple[int, bool]]]:
        seats = list(enumerate(self.taken, start=1))
        return [seats[i : i + seats_per_row] for i in range(0, len(seats), seats_per_row)]
