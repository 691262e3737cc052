from datetime import datetime
from typing import Iterable


def encode_code_payload(*, event_id: str, seat_labels: Iterable[str], timestamp: datetime) -> str:
    """
    Deterministic payload for a scannable code.

    Format: ``Event:{event_id}|Seats:{A1,B2}|Time:{epoch seconds}``

    Shared by pending selections (created_at) and tickets (purchased_at).
    An empty label list still yields a valid payload with ``Seats:``.
    """
    return f'Event:{event_id}|Seats:{",".join(seat_labels)}|Time:{timestamp.timestamp()}'
