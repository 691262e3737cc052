from datetime import datetime, timezone
from typing import Optional, Tuple
import uuid

import attrs

from campus_seats.service.catalog.domain.entity.event_entity import Event
from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection
from campus_seats.service.seating.domain.value_object.selected_seat_record import (
    SelectedSeatRecord,
)
from campus_seats.service.shared_kernel.domain.code_payload import encode_code_payload


@attrs.frozen
class Ticket:
    """Confirmed booking of one event; event fields are copied at purchase time."""

    id: str
    event_id: str
    event_name: str
    event_start_time: datetime
    room: str
    selected_seats: Tuple[SelectedSeatRecord, ...] = attrs.field(converter=tuple)
    purchased_at: datetime

    @classmethod
    def issue(
        cls, *, event: Event, selection: SeatSelection, now: Optional[datetime] = None
    ) -> 'Ticket':
        return cls(
            id=str(uuid.uuid4()),
            event_id=event.id,
            event_name=event.name,
            event_start_time=event.start_time,
            room=event.room,
            selected_seats=selection.selected_seats,
            purchased_at=now or datetime.now(timezone.utc),
        )

    @property
    def seat_labels(self) -> str:
        return ', '.join(record.seat_label for record in self.selected_seats)

    def code_payload(self) -> str:
        return encode_code_payload(
            event_id=self.event_id,
            seat_labels=[record.seat_label for record in self.selected_seats],
            timestamp=self.purchased_at,
        )
