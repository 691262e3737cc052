from datetime import datetime, timezone
from typing import Optional
import uuid

import attrs

from campus_seats.service.seating.domain.entity.seat_entity import Seat


@attrs.frozen
class SelectedSeatRecord:
    """One seat inside a persisted selection or ticket."""

    id: str
    seat_id: str
    seat_label: str
    selected_at: datetime

    @classmethod
    def from_seat(cls, seat: Seat, *, now: Optional[datetime] = None) -> 'SelectedSeatRecord':
        return cls(
            id=str(uuid.uuid4()),
            seat_id=seat.id,
            seat_label=seat.label,
            selected_at=now or datetime.now(timezone.utc),
        )
