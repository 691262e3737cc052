"""
Kvrocks Key-Value Store

Redis-protocol implementation of the persistence adapter.

Storage Format:
    Key: selectedSeat_{event_id}  -> JSON object (string)
    Key: occupiedSeats_{event_id} -> JSON array of seat ids (string)
    Key: savedTickets             -> JSON array of tickets (string)
"""

from typing import List, Optional

from opentelemetry import trace
import orjson

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.platform.state.kvrocks_client import KvrocksClient
from campus_seats.service.shared_kernel.app.interface.i_key_value_store import IKeyValueStore


class KvrocksKeyValueStore(IKeyValueStore):
    def __init__(self, *, client_holder: KvrocksClient) -> None:
        self._client_holder = client_holder
        self.tracer = trace.get_tracer(__name__)

    async def get(self, key: str) -> Optional[bytes]:
        with self.tracer.start_as_current_span(
            'state.kv.get', attributes={'cache.system': 'kvrocks', 'cache.key': key}
        ):
            value = await self._client_holder.get_client().get(key)
            if value is None:
                return None
            return value if isinstance(value, bytes) else str(value).encode()

    async def set(self, key: str, value: bytes) -> None:
        with self.tracer.start_as_current_span(
            'state.kv.set', attributes={'cache.system': 'kvrocks', 'cache.key': key}
        ):
            await self._client_holder.get_client().set(key, value)

    async def delete(self, key: str) -> None:
        with self.tracer.start_as_current_span(
            'state.kv.delete', attributes={'cache.system': 'kvrocks', 'cache.key': key}
        ):
            await self._client_holder.get_client().delete(key)

    async def get_string_list(self, key: str) -> List[str]:
        raw = await self.get(key)
        if raw is None:
            return []
        try:
            values = orjson.loads(raw)
        except orjson.JSONDecodeError:
            Logger.base.warning(f'⚠️ [KVROCKS] {key} is not a JSON list, treating as empty')
            return []
        if not isinstance(values, list):
            Logger.base.warning(f'⚠️ [KVROCKS] {key} is not a JSON list, treating as empty')
            return []
        return [str(v) for v in values]

    async def set_string_list(self, key: str, values: List[str]) -> None:
        await self.set(key, orjson.dumps(list(values)))
