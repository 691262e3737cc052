from typing import Dict, List, Optional

import orjson

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.shared_kernel.app.interface.i_key_value_store import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """
    Process-local store.

    String lists are kept JSON encoded, the same representation the Kvrocks
    backend uses, so decode failures behave identically in both.
    """

    def __init__(self, initial: Optional[Dict[str, bytes]] = None) -> None:
        self._data: Dict[str, bytes] = dict(initial or {})

    async def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def get_string_list(self, key: str) -> List[str]:
        raw = self._data.get(key)
        if raw is None:
            return []
        try:
            values = orjson.loads(raw)
        except orjson.JSONDecodeError:
            Logger.base.warning(f'⚠️ [STORE] {key} is not a JSON list, treating as empty')
            return []
        if not isinstance(values, list):
            Logger.base.warning(f'⚠️ [STORE] {key} is not a JSON list, treating as empty')
            return []
        return [str(v) for v in values]

    async def set_string_list(self, key: str, values: List[str]) -> None:
        self._data[key] = orjson.dumps(list(values))

    def keys(self) -> List[str]:
        return list(self._data)
