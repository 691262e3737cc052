"""
Test Configuration and Fixtures

Environment variables are set before any campus_seats import so settings,
key prefixes and log sinks pick them up.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ['KVROCKS_KEY_PREFIX'] = 'test_'
    os.environ['STORAGE_BACKEND'] = 'memory'
    os.environ['CATALOG_LOAD_DELAY_SECONDS'] = '0'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Awaitable, Callable, Generator  # noqa: E402
from datetime import datetime, timezone  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from campus_seats.platform.config.di import container  # noqa: E402
from campus_seats.service.booking.driven_adapter.state.ticket_state_handler_impl import (  # noqa: E402
    TicketStateHandlerImpl,
)
from campus_seats.service.catalog.domain.entity.event_entity import Event  # noqa: E402
from campus_seats.service.seating.app.command.seat_grid_engine import SeatGridEngine  # noqa: E402
from campus_seats.service.seating.driven_adapter.state.occupied_seat_state_handler_impl import (  # noqa: E402
    OccupiedSeatStateHandlerImpl,
)
from campus_seats.service.seating.driven_adapter.state.seat_selection_state_handler_impl import (  # noqa: E402
    SeatSelectionStateHandlerImpl,
)
from campus_seats.service.shared_kernel.driven_adapter.state.in_memory_key_value_store import (  # noqa: E402
    InMemoryKeyValueStore,
)


EVENT_START = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


def make_event(
    *,
    event_id: str = 'event_test',
    name: str = 'Test Lecture',
    rows: int = 2,
    columns: int = 2,
    start_time: datetime = EVENT_START,
    room: str = 'Room 1',
) -> Event:
    return Event(
        id=event_id, name=name, start_time=start_time, room=room, rows=rows, columns=columns
    )


@pytest.fixture
def event_factory() -> Callable[..., Event]:
    return make_event


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def selection_state_handler(store: InMemoryKeyValueStore) -> SeatSelectionStateHandlerImpl:
    return SeatSelectionStateHandlerImpl(store=store)


@pytest.fixture
def occupied_seat_state_handler(store: InMemoryKeyValueStore) -> OccupiedSeatStateHandlerImpl:
    return OccupiedSeatStateHandlerImpl(store=store)


@pytest.fixture
def ticket_state_handler(store: InMemoryKeyValueStore) -> TicketStateHandlerImpl:
    return TicketStateHandlerImpl(store=store)


@pytest.fixture
def engine_factory(
    selection_state_handler: SeatSelectionStateHandlerImpl,
    occupied_seat_state_handler: OccupiedSeatStateHandlerImpl,
) -> Callable[[Event], Awaitable[SeatGridEngine]]:
    """Build and initialize an engine over the shared in-memory store (a 'restart' each call)."""

    async def _factory(event: Event) -> SeatGridEngine:
        engine = SeatGridEngine(
            selection_state_handler=selection_state_handler,
            occupied_seat_state_handler=occupied_seat_state_handler,
        )
        await engine.initialize(event)
        return engine

    return _factory


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from campus_seats.main import app

    container.reset_singletons()
    with TestClient(app) as test_client:
        yield test_client
    container.reset_singletons()
