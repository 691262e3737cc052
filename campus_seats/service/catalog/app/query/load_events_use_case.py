from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from campus_seats.platform.config.di import Container
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.app.interface.i_event_catalog import IEventCatalog
from campus_seats.service.catalog.domain.catalog_validators import CatalogValidators
from campus_seats.service.catalog.domain.entity.event_entity import Event


class LoadEventsUseCase:
    """
    Load the event catalog and validate it as a whole.

    A validation failure rejects the load attempt; the caller may retry.
    """

    def __init__(self, *, event_catalog: IEventCatalog) -> None:
        self.event_catalog = event_catalog
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        event_catalog: IEventCatalog = Depends(Provide[Container.event_catalog]),
    ) -> Self:
        return cls(event_catalog=event_catalog)

    @Logger.io
    async def execute(self) -> List[Event]:
        with self.tracer.start_as_current_span('use_case.load_events'):
            events = await self.event_catalog.list_events()
            CatalogValidators.validate_catalog(events)

            Logger.base.info(f'✅ [LOAD_EVENTS] Loaded {len(events)} events')
            return events
