import asyncio
from typing import Dict

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.domain.entity.event_entity import Event
from campus_seats.service.seating.app.command.seat_grid_engine import SeatGridEngine
from campus_seats.service.seating.app.interface.i_occupied_seat_state_handler import (
    IOccupiedSeatStateHandler,
)
from campus_seats.service.seating.app.interface.i_seat_selection_state_handler import (
    ISeatSelectionStateHandler,
)


class SeatGridRegistry:
    """
    Exactly one engine per event id, initialized on first use.

    Held as a singleton so every request on an event talks to the same engine.
    """

    def __init__(
        self,
        *,
        selection_state_handler: ISeatSelectionStateHandler,
        occupied_seat_state_handler: IOccupiedSeatStateHandler,
    ) -> None:
        self.selection_state_handler = selection_state_handler
        self.occupied_seat_state_handler = occupied_seat_state_handler
        self._engines: Dict[str, SeatGridEngine] = {}
        self._lock = asyncio.Lock()

    async def get_engine(self, event: Event) -> SeatGridEngine:
        async with self._lock:
            engine = self._engines.get(event.id)
            if engine is None:
                engine = SeatGridEngine(
                    selection_state_handler=self.selection_state_handler,
                    occupied_seat_state_handler=self.occupied_seat_state_handler,
                )
                await engine.initialize(event)
                self._engines[event.id] = engine
                Logger.base.info(f'🆕 [SEAT_GRID_REGISTRY] Engine created for {event.id}')
            return engine

    def __len__(self) -> int:
        return len(self._engines)
