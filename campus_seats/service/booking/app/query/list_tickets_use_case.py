from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from campus_seats.platform.config.di import Container
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.booking.app.interface.i_ticket_state_handler import ITicketStateHandler
from campus_seats.service.booking.domain.entity.ticket_entity import Ticket


class ListTicketsUseCase:
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

    @Logger.io(truncate_content=True)
    async def execute(self) -> List[Ticket]:
        return await self.ticket_state_handler.load_all()
