from abc import ABC, abstractmethod
from typing import List, Optional

from campus_seats.service.booking.domain.entity.ticket_entity import Ticket


class ITicketStateHandler(ABC):
    """Global ticket collection, at most one ticket per event."""

    @abstractmethod
    async def load_all(self) -> List[Ticket]:
        """All tickets, newest event first"""
        pass

    @abstractmethod
    async def get(self, *, ticket_id: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def save(self, *, ticket: Ticket) -> None:
        """Store the ticket, replacing any ticket of the same event"""
        pass

    @abstractmethod
    async def delete(self, *, ticket_id: str) -> bool:
        """Return False when no ticket has this id"""
        pass
