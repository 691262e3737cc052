from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.seating.app.command.clear_seat_selection_use_case import (
    ClearSeatSelectionUseCase,
)
from campus_seats.service.seating.app.command.toggle_seat_occupied_use_case import (
    ToggleSeatOccupiedUseCase,
)
from campus_seats.service.seating.app.command.toggle_seat_selection_use_case import (
    ToggleSeatSelectionUseCase,
)
from campus_seats.service.seating.app.dto.seat_grid_view import SeatActionResult, SeatGridView
from campus_seats.service.seating.app.query.get_seat_grid_use_case import GetSeatGridUseCase
from campus_seats.service.seating.app.query.render_selection_code_use_case import (
    RenderSelectionCodeUseCase,
)
from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection
from campus_seats.service.seating.driving_adapter.http_controller.schema.seat_schema import (
    SeatActionResponse,
    SeatGridResponse,
    SeatResponse,
    SeatSelectionResponse,
    SelectedSeatResponse,
)


router = APIRouter()


def to_selection_response(selection: Optional[SeatSelection]) -> Optional[SeatSelectionResponse]:
    if selection is None:
        return None
    return SeatSelectionResponse(
        event_id=selection.event_id,
        selected_seats=[
            SelectedSeatResponse(
                id=record.id,
                seat_id=record.seat_id,
                seat_label=record.seat_label,
                selected_at=record.selected_at,
            )
            for record in selection.selected_seats
        ],
        created_at=selection.created_at,
        seat_labels=selection.seat_labels,
        code_payload=selection.code_payload(),
    )


def _to_grid_response(view: SeatGridView) -> SeatGridResponse:
    return SeatGridResponse(
        event_id=view.event_id,
        rows=view.rows,
        columns=view.columns,
        selected_count=view.selected_count,
        occupied_count=view.occupied_count,
        seats=[
            SeatResponse(
                id=seat.id,
                row=seat.row,
                column=seat.column,
                label=seat.label,
                is_selected=seat.is_selected,
                is_occupied=seat.is_occupied,
            )
            for seat in view.seats
        ],
        selection=to_selection_response(view.selection),
    )


def _to_action_response(result: SeatActionResult) -> SeatActionResponse:
    return SeatActionResponse(status=result.status.value, grid=_to_grid_response(result.view))


@router.get('/{event_id}/seats', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def get_seat_grid(
    event_id: str,
    use_case: GetSeatGridUseCase = Depends(GetSeatGridUseCase.depends),
) -> SeatGridResponse:
    view = await use_case.execute(event_id=event_id)
    return _to_grid_response(view)


@router.post('/{event_id}/seats/{seat_id}/select', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def toggle_seat_selection(
    event_id: str,
    seat_id: str,
    use_case: ToggleSeatSelectionUseCase = Depends(ToggleSeatSelectionUseCase.depends),
) -> SeatActionResponse:
    """Select or deselect a seat. Occupied and unknown seats come back as a status, not an error."""
    result = await use_case.execute(event_id=event_id, seat_id=seat_id)
    return _to_action_response(result)


@router.post('/{event_id}/seats/{seat_id}/occupied', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def toggle_seat_occupied(
    event_id: str,
    seat_id: str,
    use_case: ToggleSeatOccupiedUseCase = Depends(ToggleSeatOccupiedUseCase.depends),
) -> SeatActionResponse:
    result = await use_case.execute(event_id=event_id, seat_id=seat_id)
    return _to_action_response(result)


@router.delete('/{event_id}/selection', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def clear_seat_selection(
    event_id: str,
    use_case: ClearSeatSelectionUseCase = Depends(ClearSeatSelectionUseCase.depends),
) -> SeatActionResponse:
    result = await use_case.execute(event_id=event_id)
    return _to_action_response(result)


@router.get('/{event_id}/selection/qr', status_code=status.HTTP_200_OK)
async def get_selection_qr(
    event_id: str,
    use_case: RenderSelectionCodeUseCase = Depends(RenderSelectionCodeUseCase.depends),
) -> Response:
    image = await use_case.execute(event_id=event_id)
    return Response(content=image, media_type=use_case.code_renderer.media_type)
