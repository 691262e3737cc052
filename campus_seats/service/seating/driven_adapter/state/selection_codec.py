"""
JSON codec for seat selections and their records.

Timestamps are RFC 3339 strings (orjson's native datetime encoding).
Ticket storage reuses the record helpers.
"""

from datetime import datetime
from typing import Any, Dict

import attrs
import orjson

from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection
from campus_seats.service.seating.domain.value_object.selected_seat_record import (
    SelectedSeatRecord,
)


class SelectionDecodeError(ValueError):
    pass


def record_from_dict(data: Dict[str, Any]) -> SelectedSeatRecord:
    try:
        return SelectedSeatRecord(
            id=str(data['id']),
            seat_id=str(data['seat_id']),
            seat_label=str(data['seat_label']),
            selected_at=datetime.fromisoformat(data['selected_at']),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise SelectionDecodeError(f'Invalid seat record: {e}') from e


def encode_selection(selection: SeatSelection) -> bytes:
    return orjson.dumps(attrs.asdict(selection))


def decode_selection(raw: bytes) -> SeatSelection:
    try:
        data = orjson.loads(raw)
        return SeatSelection(
            event_id=str(data['event_id']),
            selected_seats=[record_from_dict(item) for item in data['selected_seats']],
            created_at=datetime.fromisoformat(data['created_at']),
        )
    except SelectionDecodeError:
        raise
    except (orjson.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise SelectionDecodeError(f'Invalid seat selection: {e}') from e
