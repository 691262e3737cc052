from abc import ABC, abstractmethod
from typing import List

from campus_seats.service.catalog.domain.entity.event_entity import Event


class IEventCatalog(ABC):
    """Read-only source of events. Loading may be slow (network-like)."""

    @abstractmethod
    async def list_events(self) -> List[Event]:
        pass
