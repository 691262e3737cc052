from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from campus_seats.service.seating.driving_adapter.http_controller.schema.seat_schema import (
    SelectedSeatResponse,
)


class TicketResponse(BaseModel):
    id: str
    event_id: str
    event_name: str
    event_start_time: datetime
    room: str
    selected_seats: List[SelectedSeatResponse]
    purchased_at: datetime
    seat_labels: str
    code_payload: str

    class Config:
        json_schema_extra = {
            'example': {
                'id': '0b6d8c2e-2f4a-4a8e-9d7c-5a1f3e9b7c21',
                'event_id': 'event_001',
                'event_name': 'iOS Development Lecture',
                'event_start_time': '2026-10-19T09:00:00Z',
                'room': 'Room 101',
                'selected_seats': [
                    {
                        'id': '6f1c7d0e-8f54-4f5b-9d55-1c1f0c4a7a10',
                        'seat_id': '0_0',
                        'seat_label': 'A1',
                        'selected_at': '2026-10-19T09:00:00Z',
                    }
                ],
                'purchased_at': '2026-10-19T09:00:00Z',
                'seat_labels': 'A1',
                'code_payload': 'Event:event_001|Seats:A1|Time:1792400400.0',
            }
        }


class BookingResponse(BaseModel):
    status: str
    ticket: Optional[TicketResponse] = None
