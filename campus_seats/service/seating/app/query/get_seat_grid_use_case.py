from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from campus_seats.platform.config.di import Container
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.app.query.get_event_use_case import GetEventUseCase
from campus_seats.service.seating.app.command.seat_grid_registry import SeatGridRegistry
from campus_seats.service.seating.app.dto.seat_grid_view import SeatGridView


class GetSeatGridUseCase:
    def __init__(
        self, *, get_event_use_case: GetEventUseCase, seat_grid_registry: SeatGridRegistry
    ) -> None:
        self.get_event_use_case = get_event_use_case
        self.seat_grid_registry = seat_grid_registry

    @classmethod
    @inject
    def depends(
        cls,
        get_event_use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
        seat_grid_registry: SeatGridRegistry = Depends(Provide[Container.seat_grid_registry]),
    ) -> Self:
        return cls(get_event_use_case=get_event_use_case, seat_grid_registry=seat_grid_registry)

    @Logger.io(truncate_content=True)
    async def execute(self, *, event_id: str) -> SeatGridView:
        event = await self.get_event_use_case.execute(event_id=event_id)
        engine = await self.seat_grid_registry.get_engine(event)
        return engine.view()
