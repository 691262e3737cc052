from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from campus_seats.platform.config.di import Container
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.app.query.get_event_use_case import GetEventUseCase
from campus_seats.service.seating.app.command.seat_grid_registry import SeatGridRegistry
from campus_seats.service.seating.app.dto.seat_grid_view import SeatActionResult


class ToggleSeatOccupiedUseCase:
    """Mark a seat occupied or free it again; a selected seat is deselected first."""

    def __init__(
        self, *, get_event_use_case: GetEventUseCase, seat_grid_registry: SeatGridRegistry
    ) -> None:
        self.get_event_use_case = get_event_use_case
        self.seat_grid_registry = seat_grid_registry
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        get_event_use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
        seat_grid_registry: SeatGridRegistry = Depends(Provide[Container.seat_grid_registry]),
    ) -> Self:
        return cls(get_event_use_case=get_event_use_case, seat_grid_registry=seat_grid_registry)

    @Logger.io
    async def execute(self, *, event_id: str, seat_id: str) -> SeatActionResult:
        with self.tracer.start_as_current_span(
            'use_case.toggle_seat_occupied',
            attributes={'event.id': event_id, 'seat.id': seat_id},
        ):
            event = await self.get_event_use_case.execute(event_id=event_id)
            engine = await self.seat_grid_registry.get_engine(event)
            status = await engine.toggle_occupied(seat_id)
            return SeatActionResult(status=status, view=engine.view())
