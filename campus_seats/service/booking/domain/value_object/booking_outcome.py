from typing import Optional

import attrs

from campus_seats.service.booking.domain.entity.ticket_entity import Ticket
from campus_seats.service.booking.domain.enum.booking_status import BookingStatus


@attrs.frozen
class BookingOutcome:
    status: BookingStatus
    ticket: Optional[Ticket] = None

    @property
    def is_booked(self) -> bool:
        return self.status is BookingStatus.BOOKED
