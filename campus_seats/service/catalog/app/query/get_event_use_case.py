from typing import Self

from fastapi import Depends

from campus_seats.platform.exception.exceptions import NotFoundError
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.app.query.load_events_use_case import LoadEventsUseCase
from campus_seats.service.catalog.domain.entity.event_entity import Event


class GetEventUseCase:
    def __init__(self, *, load_events_use_case: LoadEventsUseCase) -> None:
        self.load_events_use_case = load_events_use_case

    @classmethod
    def depends(
        cls,
        load_events_use_case: LoadEventsUseCase = Depends(LoadEventsUseCase.depends),
    ) -> Self:
        return cls(load_events_use_case=load_events_use_case)

    @Logger.io
    async def execute(self, *, event_id: str) -> Event:
        """
        Raises:
            NotFoundError: If no event has this id
            EventCatalogError: If the catalog fails validation
        """
        events = await self.load_events_use_case.execute()
        for event in events:
            if event.id == event_id:
                return event
        raise NotFoundError(f'Event {event_id} not found')
