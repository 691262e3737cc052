from abc import ABC, abstractmethod
from typing import Optional

from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection


class ISeatSelectionStateHandler(ABC):
    """Pending selection of one event, stored as a full snapshot."""

    @abstractmethod
    async def load(self, *, event_id: str) -> Optional[SeatSelection]:
        """Return None when absent or unreadable"""
        pass

    @abstractmethod
    async def save(self, *, selection: SeatSelection) -> None:
        pass

    @abstractmethod
    async def delete(self, *, event_id: str) -> None:
        pass
