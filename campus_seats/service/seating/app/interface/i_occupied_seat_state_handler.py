from abc import ABC, abstractmethod
from typing import List


class IOccupiedSeatStateHandler(ABC):
    @abstractmethod
    async def load(self, *, event_id: str) -> List[str]:
        """Occupied seat ids; empty when absent or unreadable"""
        pass

    @abstractmethod
    async def save(self, *, event_id: str, seat_ids: List[str]) -> None:
        """Replace the whole occupied set of the event"""
        pass
