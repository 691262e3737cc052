from typing import List

from fastapi import APIRouter, Depends, status

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.catalog.app.query.get_event_use_case import GetEventUseCase
from campus_seats.service.catalog.app.query.load_events_use_case import LoadEventsUseCase
from campus_seats.service.catalog.domain.entity.event_entity import Event
from campus_seats.service.catalog.driving_adapter.http_controller.schema.event_schema import (
    EventResponse,
)


router = APIRouter()


def _to_response(event: Event) -> EventResponse:
    return EventResponse(
        id=event.id,
        name=event.name,
        start_time=event.start_time,
        room=event.room,
        rows=event.rows,
        columns=event.columns,
        total_seats=event.total_seats,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    use_case: LoadEventsUseCase = Depends(LoadEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.execute()
    return [_to_response(event) for event in events]


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: str,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.execute(event_id=event_id)
    return _to_response(event)
