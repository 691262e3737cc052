"""
Seat Grid Engine

Owns the seat grid of one event and keeps it in step with the two persisted
facets: the pending selection and the occupied seat set.

[Write discipline]
- Every mutation runs under the engine's lock, in arrival order
- The selection is persisted as a full snapshot after each change
- The occupied set is persisted as a full id list after each change
- Loading never writes back to the store
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

import attrs
from opentelemetry import trace

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.domain.entity.event_entity import Event
from campus_seats.service.seating.app.dto.seat_grid_view import SeatGridView
from campus_seats.service.seating.app.interface.i_occupied_seat_state_handler import (
    IOccupiedSeatStateHandler,
)
from campus_seats.service.seating.app.interface.i_seat_selection_state_handler import (
    ISeatSelectionStateHandler,
)
from campus_seats.service.seating.domain.aggregate.seat_grid_aggregate import (
    ReconciliationReport,
    SeatGrid,
)
from campus_seats.service.seating.domain.enum.seat_action_status import SeatActionStatus
from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection


class SeatGridEngine:
    def __init__(
        self,
        *,
        selection_state_handler: ISeatSelectionStateHandler,
        occupied_seat_state_handler: IOccupiedSeatStateHandler,
    ) -> None:
        self.selection_state_handler = selection_state_handler
        self.occupied_seat_state_handler = occupied_seat_state_handler
        self.tracer = trace.get_tracer(__name__)
        self._lock = asyncio.Lock()
        self._event: Optional[Event] = None
        self._grid: Optional[SeatGrid] = None
        self._selection: Optional[SeatSelection] = None

    @property
    def event(self) -> Event:
        if self._event is None:
            raise RuntimeError('Seat grid engine not initialized')
        return self._event

    @property
    def grid(self) -> SeatGrid:
        if self._grid is None:
            raise RuntimeError('Seat grid engine not initialized')
        return self._grid

    @property
    def selection(self) -> Optional[SeatSelection]:
        """Last derived snapshot of the live selection"""
        return self._selection

    async def initialize(self, event: Event) -> ReconciliationReport:
        """Build a fresh grid for the event and overlay persisted state."""
        async with self._lock:
            with self.tracer.start_as_current_span(
                'seat_grid.initialize', attributes={'event.id': event.id}
            ):
                grid = SeatGrid.generate(event_id=event.id, rows=event.rows, columns=event.columns)

                occupied_ids = await self.occupied_seat_state_handler.load(event_id=event.id)
                persisted = await self.selection_state_handler.load(event_id=event.id)
                report = grid.reconcile(occupied_ids=occupied_ids, selection=persisted)

                self._event = event
                self._grid = grid
                self._selection = grid.snapshot_selection() if grid.selected_seat_ids else None

                Logger.base.info(
                    f'🪑 [SEAT_GRID] {event.id}: {len(grid.seats)} seats, '
                    f'{len(grid.occupied_seat_ids)} occupied, {len(grid.selected_seat_ids)} selected'
                )
                return report

    async def toggle_select(self, seat_id: str) -> SeatActionStatus:
        async with self._lock:
            status = self.grid.toggle_select(seat_id)
            if status in (SeatActionStatus.SELECTED, SeatActionStatus.DESELECTED):
                await self._persist_selection()
            else:
                Logger.base.info(f'🚫 [SEAT_GRID] {self.event.id}: {seat_id} rejected ({status.value})')
            return status

    async def clear_selection(self) -> SeatActionStatus:
        async with self._lock:
            status = self.grid.clear_selection()
            self._selection = None
            await self.selection_state_handler.delete(event_id=self.event.id)
            Logger.base.info(f'🧹 [SEAT_GRID] {self.event.id}: selection cleared')
            return status

    async def toggle_occupied(self, seat_id: str) -> SeatActionStatus:
        async with self._lock:
            if self.grid.get_seat(seat_id) is None:
                return SeatActionStatus.SEAT_NOT_FOUND

            if self.grid.deselect(seat_id):
                await self._persist_selection()

            status = self.grid.toggle_occupied(seat_id)
            await self.occupied_seat_state_handler.save(
                event_id=self.event.id, seat_ids=self.grid.occupied_seat_ids
            )
            return status

    async def commit_selection(self) -> SeatSelection:
        """
        Fresh snapshot of the live selection for booking, persisted under the lock.

        Starts a new created_at. An empty selection is returned as is and
        leaves the engine and the store untouched.
        """
        async with self._lock:
            if not self.grid.selected_seat_ids:
                return SeatSelection(
                    event_id=self.event.id,
                    selected_seats=[],
                    created_at=datetime.now(timezone.utc),
                )

            self._selection = self.grid.snapshot_selection(renew=True)
            await self.selection_state_handler.save(selection=self._selection)
            return self._selection

    def code_payload(self) -> Optional[str]:
        if self._selection is None or self._selection.is_empty:
            return None
        return self._selection.code_payload()

    def view(self) -> SeatGridView:
        grid = self.grid
        return SeatGridView(
            event_id=grid.event_id,
            rows=grid.rows,
            columns=grid.columns,
            seats=tuple(attrs.evolve(seat) for seat in grid.seats),
            selection=self._selection,
        )

    async def _persist_selection(self) -> None:
        # An emptied selection is still written; only clear_selection deletes the record
        self._selection = self.grid.snapshot_selection()
        await self.selection_state_handler.save(selection=self._selection)
