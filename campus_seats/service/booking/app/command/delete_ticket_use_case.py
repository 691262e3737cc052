from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from campus_seats.platform.config.di import Container
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.booking.app.interface.i_ticket_state_handler import ITicketStateHandler


class DeleteTicketUseCase:
    """Remove a ticket. Seat grids are untouched."""

    def __init__(self, *, ticket_state_handler: ITicketStateHandler) -> None:
        self.ticket_state_handler = ticket_state_handler

    @classmethod
    @inject
    def depends(
        cls,
        ticket_state_handler: ITicketStateHandler = Depends(
            Provide[Container.ticket_state_handler]
        ),
    ) -> Self:
        return cls(ticket_state_handler=ticket_state_handler)

    @Logger.io
    async def execute(self, *, ticket_id: str) -> bool:
        deleted = await self.ticket_state_handler.delete(ticket_id=ticket_id)
        if deleted:
            Logger.base.info(f'🗑️ [TICKETS] Deleted {ticket_id}')
        return deleted
