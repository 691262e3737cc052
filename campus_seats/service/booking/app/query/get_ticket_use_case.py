from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from campus_seats.platform.config.di import Container
from campus_seats.platform.exception.exceptions import NotFoundError
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.booking.app.interface.i_ticket_state_handler import ITicketStateHandler
from campus_seats.service.booking.domain.entity.ticket_entity import Ticket
from campus_seats.service.shared_kernel.app.interface.i_code_renderer import ICodeRenderer


class GetTicketUseCase:
    def __init__(
        self, *, ticket_state_handler: ITicketStateHandler, code_renderer: ICodeRenderer
    ) -> None:
        self.ticket_state_handler = ticket_state_handler
        self.code_renderer = code_renderer

    @classmethod
    @inject
    def depends(
        cls,
        ticket_state_handler: ITicketStateHandler = Depends(
            Provide[Container.ticket_state_handler]
        ),
        code_renderer: ICodeRenderer = Depends(Provide[Container.code_renderer]),
    ) -> Self:
        return cls(ticket_state_handler=ticket_state_handler, code_renderer=code_renderer)

    @Logger.io
    async def execute(self, *, ticket_id: str) -> Ticket:
        """
        Raises:
            NotFoundError: If no ticket has this id
        """
        ticket = await self.ticket_state_handler.get(ticket_id=ticket_id)
        if ticket is None:
            raise NotFoundError(f'Ticket {ticket_id} not found')
        return ticket

    @Logger.io(truncate_content=True)
    async def render_code(self, *, ticket_id: str) -> bytes:
        ticket = await self.execute(ticket_id=ticket_id)
        return self.code_renderer.render(ticket.code_payload())
