"""
Key-Value Store Interface

Persistence substrate for seat selections, occupied seats and tickets.
Values are opaque encoded blobs; no transactions beyond last-write-wins.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class IKeyValueStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[bytes]:
        """Return the stored blob or None when the key is absent"""
        pass

    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the key; deleting an absent key is not an error"""
        pass

    @abstractmethod
    async def get_string_list(self, key: str) -> List[str]:
        """Return the stored list, or an empty list when absent or unreadable"""
        pass

    @abstractmethod
    async def set_string_list(self, key: str, values: List[str]) -> None:
        pass
