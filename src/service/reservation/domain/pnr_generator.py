"""
PNR Generator

Identifier = 'PNR' + month, day, hour, minute (two digits each, local time)
+ a 4-digit pseudo-random suffix, e.g. PNR101814070042.

No uniqueness check is made against stored tickets: two bookings in the
same minute can collide on the suffix (1 in 10000).
"""

from datetime import datetime
import random
from typing import Callable

from src.platform.logging.loguru_io import Logger


class PnrGenerator:
    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
    ) -> None:
        self.clock = clock
        # Seeded from the clock at startup
        self.rng = rng if rng is not None else random.Random(int(clock().timestamp()))

    @Logger.io
    def generate(self) -> str:
        now = self.clock()
        suffix = self.rng.randrange(10000)
        return f'PNR{now.month:02d}{now.day:02d}{now.hour:02d}{now.minute:02d}{suffix:04d}'
