from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class SeatResponse(BaseModel):
    id: str
    row: int
    column: int
    label: str
    is_selected: bool
    is_occupied: bool


class SelectedSeatResponse(BaseModel):
    id: str
    seat_id: str
    seat_label: str
    selected_at: datetime


class SeatSelectionResponse(BaseModel):
    event_id: str
    selected_seats: List[SelectedSeatResponse]
    created_at: datetime
    seat_labels: str
    code_payload: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'event_id': 'event_001',
                'selected_seats': [
                    {
                        'id': '6f1c7d0e-8f54-4f5b-9d55-1c1f0c4a7a10',
                        'seat_id': '0_0',
                        'seat_label': 'A1',
                        'selected_at': '2026-10-19T09:00:00Z',
                    }
                ],
                'created_at': '2026-10-19T09:00:00Z',
                'seat_labels': 'A1',
                'code_payload': 'Event:event_001|Seats:A1|Time:1792400400.0',
            }
        }


class SeatGridResponse(BaseModel):
    event_id: str
    rows: int
    columns: int
    selected_count: int
    occupied_count: int
    seats: List[SeatResponse]
    selection: Optional[SeatSelectionResponse] = None


class SeatActionResponse(BaseModel):
    status: str
    grid: SeatGridResponse
