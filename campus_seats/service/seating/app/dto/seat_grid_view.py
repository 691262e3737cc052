from typing import Optional, Tuple

import attrs

from campus_seats.service.seating.domain.entity.seat_entity import Seat
from campus_seats.service.seating.domain.enum.seat_action_status import SeatActionStatus
from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection


@attrs.frozen
class SeatGridView:
    """Read-only copy of an engine's grid and live selection."""

    event_id: str
    rows: int
    columns: int
    seats: Tuple[Seat, ...]
    selection: Optional[SeatSelection]

    @property
    def selected_count(self) -> int:
        return sum(1 for seat in self.seats if seat.is_selected)

    @property
    def occupied_count(self) -> int:
        return sum(1 for seat in self.seats if seat.is_occupied)


@attrs.frozen
class SeatActionResult:
    status: SeatActionStatus
    view: SeatGridView
