"""
Ticket State Handler Implementation

Storage Format:
    Key: savedTickets
    Value: JSON array of tickets
        {id, event_id, event_name, event_start_time, room,
         selected_seats: [{id, seat_id, seat_label, selected_at}], purchased_at}

The whole collection is rewritten on every change (last write wins).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import attrs
from opentelemetry import trace
import orjson

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.booking.app.interface.i_ticket_state_handler import ITicketStateHandler
from campus_seats.service.booking.domain.entity.ticket_entity import Ticket
from campus_seats.service.seating.driven_adapter.state.selection_codec import (
    SelectionDecodeError,
    record_from_dict,
)
from campus_seats.service.shared_kernel.app.interface.i_key_value_store import IKeyValueStore
from campus_seats.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_saved_tickets_key,
)


def _ticket_from_dict(data: Dict[str, Any]) -> Ticket:
    return Ticket(
        id=str(data['id']),
        event_id=str(data['event_id']),
        event_name=str(data['event_name']),
        event_start_time=datetime.fromisoformat(data['event_start_time']),
        room=str(data['room']),
        selected_seats=[record_from_dict(item) for item in data['selected_seats']],
        purchased_at=datetime.fromisoformat(data['purchased_at']),
    )


class TicketStateHandlerImpl(ITicketStateHandler):
    def __init__(self, *, store: IKeyValueStore) -> None:
        self.store = store
        self.tracer = trace.get_tracer(__name__)

    async def _read(self) -> List[Ticket]:
        raw = await self.store.get(make_saved_tickets_key())
        if raw is None:
            return []
        try:
            items = orjson.loads(raw)
            if not isinstance(items, list):
                raise TypeError(f'expected a list, got {type(items).__name__}')
            return [_ticket_from_dict(item) for item in items]
        except (SelectionDecodeError, KeyError, TypeError, ValueError) as e:
            Logger.base.warning(f'⚠️ [TICKETS] unreadable ticket collection ignored ({e})')
            return []

    async def _write(self, tickets: List[Ticket]) -> None:
        await self.store.set(
            make_saved_tickets_key(), orjson.dumps([attrs.asdict(ticket) for ticket in tickets])
        )

    async def load_all(self) -> List[Ticket]:
        with self.tracer.start_as_current_span('state.tickets.load_all'):
            tickets = await self._read()
            return sorted(tickets, key=lambda ticket: ticket.event_start_time, reverse=True)

    async def get(self, *, ticket_id: str) -> Optional[Ticket]:
        for ticket in await self._read():
            if ticket.id == ticket_id:
                return ticket
        return None

    async def save(self, *, ticket: Ticket) -> None:
        with self.tracer.start_as_current_span(
            'state.tickets.save', attributes={'event.id': ticket.event_id}
        ):
            tickets = [t for t in await self._read() if t.event_id != ticket.event_id]
            tickets.append(ticket)
            await self._write(tickets)

    async def delete(self, *, ticket_id: str) -> bool:
        with self.tracer.start_as_current_span(
            'state.tickets.delete', attributes={'ticket.id': ticket_id}
        ):
            tickets = await self._read()
            remaining = [t for t in tickets if t.id != ticket_id]
            if len(remaining) == len(tickets):
                return False
            await self._write(remaining)
            return True
