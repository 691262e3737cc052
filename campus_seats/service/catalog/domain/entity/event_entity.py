from datetime import datetime

import attrs


@attrs.frozen
class Event:
    """A scheduled lecture or seminar with a rectangular seat layout."""

    id: str
    name: str
    start_time: datetime
    room: str
    rows: int
    columns: int

    @property
    def total_seats(self) -> int:
        return self.rows * self.columns
