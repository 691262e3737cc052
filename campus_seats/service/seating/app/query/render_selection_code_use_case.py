from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from campus_seats.platform.config.di import Container
from campus_seats.platform.exception.exceptions import ConflictError
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.app.query.get_event_use_case import GetEventUseCase
from campus_seats.service.seating.app.command.seat_grid_registry import SeatGridRegistry
from campus_seats.service.shared_kernel.app.interface.i_code_renderer import ICodeRenderer


class RenderSelectionCodeUseCase:
    """Scannable code of the pending selection of one event."""

    def __init__(
        self,
        *,
        get_event_use_case: GetEventUseCase,
        seat_grid_registry: SeatGridRegistry,
        code_renderer: ICodeRenderer,
    ) -> None:
        self.get_event_use_case = get_event_use_case
        self.seat_grid_registry = seat_grid_registry
        self.code_renderer = code_renderer

    @classmethod
    @inject
    def depends(
        cls,
        get_event_use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
        seat_grid_registry: SeatGridRegistry = Depends(Provide[Container.seat_grid_registry]),
        code_renderer: ICodeRenderer = Depends(Provide[Container.code_renderer]),
    ) -> Self:
        return cls(
            get_event_use_case=get_event_use_case,
            seat_grid_registry=seat_grid_registry,
            code_renderer=code_renderer,
        )

    async def payload(self, *, event_id: str) -> str:
        """
        Raises:
            ConflictError: Nothing is selected
        """
        event = await self.get_event_use_case.execute(event_id=event_id)
        engine = await self.seat_grid_registry.get_engine(event)
        payload = engine.code_payload()
        if payload is None:
            raise ConflictError(f'No seats selected for event {event_id}')
        return payload

    @Logger.io(truncate_content=True)
    async def execute(self, *, event_id: str) -> bytes:
        return self.code_renderer.render(await self.payload(event_id=event_id))
