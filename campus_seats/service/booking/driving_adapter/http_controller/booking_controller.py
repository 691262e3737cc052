from typing import List

from fastapi import APIRouter, Depends, Response, status

from campus_seats.platform.exception.exceptions import NotFoundError
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.booking.app.command.book_seats_use_case import BookSeatsUseCase
from campus_seats.service.booking.app.command.delete_ticket_use_case import DeleteTicketUseCase
from campus_seats.service.booking.app.query.get_ticket_use_case import GetTicketUseCase
from campus_seats.service.booking.app.query.list_tickets_use_case import ListTicketsUseCase
from campus_seats.service.booking.domain.entity.ticket_entity import Ticket
from campus_seats.service.booking.driving_adapter.http_controller.schema.ticket_schema import (
    BookingResponse,
    TicketResponse,
)
from campus_seats.service.seating.driving_adapter.http_controller.schema.seat_schema import (
    SelectedSeatResponse,
)


router = APIRouter()


def _to_ticket_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        event_id=ticket.event_id,
        event_name=ticket.event_name,
        event_start_time=ticket.event_start_time,
        room=ticket.room,
        selected_seats=[
            SelectedSeatResponse(
                id=record.id,
                seat_id=record.seat_id,
                seat_label=record.seat_label,
                selected_at=record.selected_at,
            )
            for record in ticket.selected_seats
        ],
        purchased_at=ticket.purchased_at,
        seat_labels=ticket.seat_labels,
        code_payload=ticket.code_payload(),
    )


@router.post('/events/{event_id}/booking', status_code=status.HTTP_201_CREATED)
@Logger.io
async def book_seats(
    event_id: str,
    response: Response,
    use_case: BookSeatsUseCase = Depends(BookSeatsUseCase.depends),
) -> BookingResponse:
    outcome = await use_case.execute(event_id=event_id)
    if not outcome.is_booked:
        response.status_code = status.HTTP_409_CONFLICT
    return BookingResponse(
        status=outcome.status.value,
        ticket=_to_ticket_response(outcome.ticket) if outcome.ticket else None,
    )


@router.get('/tickets', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def list_tickets(
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.execute()
    return [_to_ticket_response(ticket) for ticket in tickets]


@router.get('/tickets/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket(
    ticket_id: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id)
    return _to_ticket_response(ticket)


@router.get('/tickets/{ticket_id}/qr', status_code=status.HTTP_200_OK)
async def get_ticket_qr(
    ticket_id: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> Response:
    image = await use_case.render_code(ticket_id=ticket_id)
    return Response(content=image, media_type=use_case.code_renderer.media_type)


@router.delete('/tickets/{ticket_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_ticket(
    ticket_id: str,
    use_case: DeleteTicketUseCase = Depends(DeleteTicketUseCase.depends),
) -> None:
    if not await use_case.execute(ticket_id=ticket_id):
        raise NotFoundError(f'Ticket {ticket_id} not found')
