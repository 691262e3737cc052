from datetime import datetime
from typing import Optional, Tuple

import attrs

from campus_seats.service.seating.domain.value_object.selected_seat_record import (
    SelectedSeatRecord,
)
from campus_seats.service.shared_kernel.domain.code_payload import encode_code_payload


@attrs.frozen
class SeatSelection:
    """Snapshot of the pending selection of one event, in selection order."""

    event_id: str
    selected_seats: Tuple[SelectedSeatRecord, ...] = attrs.field(converter=tuple)
    created_at: datetime

    @property
    def is_empty(self) -> bool:
        return not self.selected_seats

    @property
    def seat_ids(self) -> Tuple[str, ...]:
        return tuple(record.seat_id for record in self.selected_seats)

    @property
    def seat_labels(self) -> str:
        return ', '.join(record.seat_label for record in self.selected_seats)

    def code_payload(self) -> Optional[str]:
        if self.is_empty:
            return None
        return encode_code_payload(
            event_id=self.event_id,
            seat_labels=[record.seat_label for record in self.selected_seats],
            timestamp=self.created_at,
        )
