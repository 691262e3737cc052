from unittest.mock import AsyncMock, Mock

import orjson
import pytest

from campus_seats.service.shared_kernel.driven_adapter.state.in_memory_key_value_store import (
    InMemoryKeyValueStore,
)
from campus_seats.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_occupied_seats_key,
    make_saved_tickets_key,
    make_selected_seat_key,
)
from campus_seats.service.shared_kernel.driven_adapter.state.kvrocks_key_value_store import (
    KvrocksKeyValueStore,
)


@pytest.mark.unit
class TestKeyStrGenerator:
    def test_keys_carry_prefix_and_facet_name(self) -> None:
        assert make_selected_seat_key(event_id='event_001') == 'test_selectedSeat_event_001'
        assert make_occupied_seats_key(event_id='event_001') == 'test_occupiedSeats_event_001'
        assert make_saved_tickets_key() == 'test_savedTickets'


@pytest.mark.unit
class TestInMemoryKeyValueStore:
    @pytest.mark.asyncio
    async def test_get_set_delete(self) -> None:
        store = InMemoryKeyValueStore()

        assert await store.get('k') is None
        await store.set('k', b'v')
        assert await store.get('k') == b'v'
        await store.delete('k')
        assert await store.get('k') is None

    @pytest.mark.asyncio
    async def test_delete_absent_key_is_noop(self) -> None:
        store = InMemoryKeyValueStore()

        await store.delete('missing')

        assert store.keys() == []

    @pytest.mark.asyncio
    async def test_string_list_round_trip_keeps_order(self) -> None:
        store = InMemoryKeyValueStore()

        await store.set_string_list('ids', ['1_1', '0_0'])

        assert await store.get_string_list('ids') == ['1_1', '0_0']

    @pytest.mark.asyncio
    async def test_string_list_absent_is_empty(self) -> None:
        assert await InMemoryKeyValueStore().get_string_list('ids') == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize('raw', [b'not json', b'{"a": 1}'])
    async def test_unreadable_string_list_is_empty(self, raw: bytes) -> None:
        store = InMemoryKeyValueStore(initial={'ids': raw})

        assert await store.get_string_list('ids') == []


@pytest.mark.unit
class TestKvrocksKeyValueStore:
    @pytest.fixture
    def redis_client(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def store(self, redis_client: AsyncMock) -> KvrocksKeyValueStore:
        client_holder = Mock()
        client_holder.get_client = Mock(return_value=redis_client)
        return KvrocksKeyValueStore(client_holder=client_holder)

    @pytest.mark.asyncio
    async def test_set_and_delete_go_to_client(
        self, store: KvrocksKeyValueStore, redis_client: AsyncMock
    ) -> None:
        await store.set('k', b'v')
        await store.delete('k')

        redis_client.set.assert_awaited_once_with('k', b'v')
        redis_client.delete.assert_awaited_once_with('k')

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(
        self, store: KvrocksKeyValueStore, redis_client: AsyncMock
    ) -> None:
        redis_client.get = AsyncMock(return_value=None)

        assert await store.get('k') is None

    @pytest.mark.asyncio
    async def test_string_list_is_json_array(
        self, store: KvrocksKeyValueStore, redis_client: AsyncMock
    ) -> None:
        await store.set_string_list('ids', ['0_1'])

        redis_client.set.assert_awaited_once_with('ids', orjson.dumps(['0_1']))

    @pytest.mark.asyncio
    async def test_corrupt_string_list_is_empty(
        self, store: KvrocksKeyValueStore, redis_client: AsyncMock
    ) -> None:
        redis_client.get = AsyncMock(return_value=b'\x00garbage')

        assert await store.get_string_list('ids') == []
