"""
Test Configuration and Fixtures

This module provides:
- Test environment variables, set before any application import
- In-memory ticket storage and a deterministic PNR generator
- A TicketStore factory with configurable seat capacity

Architecture:
- Unit tests (test/**/unit/): in-memory storage only
- Integration tests (test/**/integration/): real files under tmp_path
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Debug mode exercises the Logger.io argument tracing
    os.environ['DEBUG'] = 'true'

    # Never touch the real data file from tests
    os.environ['RESERVATION_DATA_FILE'] = str(
        Path(tempfile.gettempdir()) / f'reservation_test_{os.getpid()}.dat'
    )


_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402
from datetime import datetime  # noqa: E402

import pytest  # noqa: E402

from src.service.reservation.app.ticket_store import TicketStore  # noqa: E402
from src.service.reservation.domain.pnr_generator import PnrGenerator  # noqa: E402
from src.service.reservation.driven_adapter.storage.in_memory_ticket_storage import (  # noqa: E402
    InMemoryTicketStorage,
)
from test.constants import FIXED_NOW  # noqa: E402


class SequentialRandom:
    """Stand-in for random.Random: randrange returns 0, 1, 2, ..."""

    def __init__(self, start: int = 0) -> None:
        self.next_value = start

    def randrange(self, stop: int) -> int:
        value = self.next_value % stop
        self.next_value += 1
        return value


@pytest.fixture
def pnr_generator() -> PnrGenerator:
    return PnrGenerator(clock=lambda: FIXED_NOW, rng=SequentialRandom())  # type: ignore[arg-type]


@pytest.fixture
def storage() -> InMemoryTicketStorage:
    return InMemoryTicketStorage()


@pytest.fixture
def make_ticket_store(
    storage: InMemoryTicketStorage, pnr_generator: PnrGenerator
) -> Callable[..., TicketStore]:
    def _make(max_seats: int = 5) -> TicketStore:
        return TicketStore(storage=storage, pnr_generator=pnr_generator, max_seats=max_seats)

    return _make


@pytest.fixture
def ticket_store(make_ticket_store: Callable[..., TicketStore]) -> TicketStore:
    return make_ticket_store()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
