from datetime import datetime

from pydantic import BaseModel


class EventResponse(BaseModel):
    id: str
    name: str
    start_time: datetime
    room: str
    rows: int
    columns: int
    total_seats: int

    class Config:
        json_schema_extra = {
            'example': {
                'id': 'event_001',
                'name': 'iOS Development Lecture',
                'start_time': '2026-10-19T09:00:00Z',
                'room': 'Room 101',
                'rows': 5,
                'columns': 6,
                'total_seats': 30,
            }
        }
