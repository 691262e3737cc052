from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from campus_seats.platform.config.di import Container
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.booking.app.interface.i_ticket_state_handler import ITicketStateHandler
from campus_seats.service.booking.domain.entity.ticket_entity import Ticket
from campus_seats.service.booking.domain.enum.booking_status import BookingStatus
from campus_seats.service.booking.domain.value_object.booking_outcome import BookingOutcome
from campus_seats.service.catalog.app.query.get_event_use_case import GetEventUseCase
from campus_seats.service.catalog.domain.entity.event_entity import Event
from campus_seats.service.seating.app.command.seat_grid_registry import SeatGridRegistry
from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection


class BookSeatsUseCase:
    """
    Turn the pending selection of an event into a ticket.

    The engine re-persists the committed selection under its own lock; this
    use case only issues and stores the ticket. The selection is left in
    place after booking, and booking the same event again replaces the
    earlier ticket.
    """

    def __init__(
        self,
        *,
        get_event_use_case: GetEventUseCase,
        seat_grid_registry: SeatGridRegistry,
        ticket_state_handler: ITicketStateHandler,
    ) -> None:
        self.get_event_use_case = get_event_use_case
        self.seat_grid_registry = seat_grid_registry
        self.ticket_state_handler = ticket_state_handler
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        get_event_use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
        seat_grid_registry: SeatGridRegistry = Depends(Provide[Container.seat_grid_registry]),
        ticket_state_handler: ITicketStateHandler = Depends(
            Provide[Container.ticket_state_handler]
        ),
    ) -> Self:
        return cls(
            get_event_use_case=get_event_use_case,
            seat_grid_registry=seat_grid_registry,
            ticket_state_handler=ticket_state_handler,
        )

    @Logger.io
    async def execute(self, *, event_id: str) -> BookingOutcome:
        event = await self.get_event_use_case.execute(event_id=event_id)
        engine = await self.seat_grid_registry.get_engine(event)
        selection = await engine.commit_selection()
        return await self.book(event=event, selection=selection)

    async def book(self, *, event: Event, selection: SeatSelection) -> BookingOutcome:
        with self.tracer.start_as_current_span(
            'use_case.book_seats', attributes={'event.id': event.id}
        ):
            if selection.is_empty:
                Logger.base.info(f'❌ [BOOKING] {event.id}: nothing selected')
                return BookingOutcome(status=BookingStatus.NOTHING_SELECTED)

            ticket = Ticket.issue(event=event, selection=selection)
            await self.ticket_state_handler.save(ticket=ticket)

            Logger.base.info(f'🎫 [BOOKING] {event.id}: booked {ticket.seat_labels} as {ticket.id}')
            return BookingOutcome(status=BookingStatus.BOOKED, ticket=ticket)
