from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

import anyio

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.app.interface.i_event_catalog import IEventCatalog
from campus_seats.service.catalog.domain.entity.event_entity import Event


def build_demo_events(now: datetime) -> List[Event]:
    return [
        Event(
            id='event_001',
            name='iOS Development Lecture',
            start_time=now,
            room='Room 101',
            rows=5,
            columns=6,
        ),
        Event(
            id='event_002',
            name='SwiftUI Seminar',
            start_time=now + timedelta(days=1),
            room='Room 205',
            rows=4,
            columns=5,
        ),
        Event(
            id='event_003',
            name='Architecture Workshop',
            start_time=now + timedelta(days=2),
            room='Room 310',
            rows=6,
            columns=7,
        ),
        Event(
            id='event_004',
            name='Mobile Development Exam',
            start_time=now + timedelta(days=3),
            room='Room 150',
            rows=8,
            columns=10,
        ),
    ]


class DemoEventCatalogImpl(IEventCatalog):
    """
    Static campus catalog behind a simulated network delay.

    Start times are anchored to the first load so repeated loads return the
    same events.
    """

    def __init__(
        self,
        *,
        delay_seconds: float = 0.5,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.delay_seconds = delay_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._events: Optional[List[Event]] = None

    async def list_events(self) -> List[Event]:
        if self.delay_seconds > 0:
            await anyio.sleep(self.delay_seconds)

        if self._events is None:
            self._events = build_demo_events(self._clock())
            Logger.base.info(f'📚 [CATALOG] Built {len(self._events)} demo events')

        return list(self._events)
