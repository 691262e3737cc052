"""
Seat grid engine over the in-memory store.

Each `engine_factory(event)` call builds a fresh engine on the same store,
which is how a restart is simulated.
"""

import asyncio
from typing import Awaitable, Callable

import pytest

from campus_seats.service.catalog.domain.entity.event_entity import Event
from campus_seats.service.seating.app.command.seat_grid_engine import SeatGridEngine
from campus_seats.service.seating.app.command.seat_grid_registry import SeatGridRegistry
from campus_seats.service.seating.domain.enum.seat_action_status import SeatActionStatus
from campus_seats.service.seating.driven_adapter.state.occupied_seat_state_handler_impl import (
    OccupiedSeatStateHandlerImpl,
)
from campus_seats.service.seating.driven_adapter.state.seat_selection_state_handler_impl import (
    SeatSelectionStateHandlerImpl,
)
from campus_seats.service.shared_kernel.driven_adapter.state.in_memory_key_value_store import (
    InMemoryKeyValueStore,
)
from campus_seats.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_occupied_seats_key,
    make_selected_seat_key,
)


EngineFactory = Callable[[Event], Awaitable[SeatGridEngine]]


@pytest.mark.unit
class TestSeatGridEngineInitialize:
    @pytest.mark.asyncio
    async def test_fresh_event_has_clean_grid(
        self, engine_factory: EngineFactory, event_factory: Callable[..., Event]
    ) -> None:
        engine = await engine_factory(event_factory(rows=3, columns=4))

        view = engine.view()
        assert len(view.seats) == 12
        assert view.selected_count == 0 and view.occupied_count == 0
        assert engine.selection is None
        assert engine.code_payload() is None

    @pytest.mark.asyncio
    async def test_initialize_does_not_write(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        store: InMemoryKeyValueStore,
    ) -> None:
        await engine_factory(event_factory())

        assert store.keys() == []

    @pytest.mark.asyncio
    async def test_unreadable_selection_is_treated_as_absent(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        store: InMemoryKeyValueStore,
    ) -> None:
        event = event_factory()
        await store.set(make_selected_seat_key(event_id=event.id), b'{"broken":')

        engine = await engine_factory(event)

        assert engine.view().selected_count == 0


@pytest.mark.unit
class TestSeatGridEngineSelection:
    @pytest.mark.asyncio
    async def test_two_by_two_scenario(
        self, engine_factory: EngineFactory, event_factory: Callable[..., Event]
    ) -> None:
        event = event_factory(event_id='event_2x2', rows=2, columns=2)
        engine = await engine_factory(event)

        assert await engine.toggle_select('0_0') is SeatActionStatus.SELECTED
        assert await engine.toggle_select('1_1') is SeatActionStatus.SELECTED

        selection = engine.selection
        assert selection is not None
        assert selection.seat_labels == 'A1, B2'
        assert engine.code_payload() == (
            f'Event:event_2x2|Seats:A1,B2|Time:{selection.created_at.timestamp()}'
        )

        restarted = await engine_factory(event)
        assert [seat.id for seat in restarted.grid.selected_seats] == ['0_0', '1_1']
        assert restarted.selection.seat_labels == 'A1, B2'

    @pytest.mark.asyncio
    async def test_toggle_round_trip_persists_empty_snapshot(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        selection_state_handler: SeatSelectionStateHandlerImpl,
    ) -> None:
        event = event_factory()
        engine = await engine_factory(event)

        await engine.toggle_select('0_1')
        assert await engine.toggle_select('0_1') is SeatActionStatus.DESELECTED

        persisted = await selection_state_handler.load(event_id=event.id)
        assert persisted is not None and persisted.is_empty
        assert engine.code_payload() is None

    @pytest.mark.asyncio
    async def test_created_at_is_kept_across_toggles(
        self, engine_factory: EngineFactory, event_factory: Callable[..., Event]
    ) -> None:
        engine = await engine_factory(event_factory())

        await engine.toggle_select('0_0')
        first_created_at = engine.selection.created_at
        await engine.toggle_select('1_0')

        assert engine.selection.created_at == first_created_at

    @pytest.mark.asyncio
    async def test_clear_then_reload_has_nothing_selected(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        store: InMemoryKeyValueStore,
    ) -> None:
        event = event_factory()
        engine = await engine_factory(event)
        await engine.toggle_select('0_0')
        await engine.toggle_select('1_0')

        assert await engine.clear_selection() is SeatActionStatus.CLEARED

        assert make_selected_seat_key(event_id=event.id) not in store.keys()
        restarted = await engine_factory(event)
        assert restarted.view().selected_count == 0

    @pytest.mark.asyncio
    async def test_rejected_toggle_does_not_write(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        store: InMemoryKeyValueStore,
    ) -> None:
        engine = await engine_factory(event_factory())

        assert await engine.toggle_select('4_4') is SeatActionStatus.SEAT_NOT_FOUND

        assert store.keys() == []

    @pytest.mark.asyncio
    async def test_commit_selection_renews_created_at(
        self, engine_factory: EngineFactory, event_factory: Callable[..., Event]
    ) -> None:
        engine = await engine_factory(event_factory())
        await engine.toggle_select('0_0')
        before = engine.selection

        committed = await engine.commit_selection()

        assert committed.seat_ids == ('0_0',)
        assert committed.created_at >= before.created_at
        assert committed.selected_seats[0].id != before.selected_seats[0].id
        assert engine.selection is committed

    @pytest.mark.asyncio
    async def test_commit_selection_persists_snapshot(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        selection_state_handler: SeatSelectionStateHandlerImpl,
    ) -> None:
        event = event_factory()
        engine = await engine_factory(event)
        await engine.toggle_select('0_1')

        committed = await engine.commit_selection()

        assert await selection_state_handler.load(event_id=event.id) == committed

    @pytest.mark.asyncio
    async def test_empty_commit_has_no_side_effects(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        store: InMemoryKeyValueStore,
    ) -> None:
        engine = await engine_factory(event_factory())

        committed = await engine.commit_selection()

        assert committed.is_empty
        assert engine.selection is None
        assert engine.grid.selection_created_at is None
        assert store.keys() == []

        await engine.toggle_select('0_0')

        assert engine.selection.created_at == engine.grid.selection_created_at
        assert engine.selection.seat_ids == ('0_0',)


@pytest.mark.unit
class TestSeatGridEngineOccupancy:
    @pytest.mark.asyncio
    async def test_occupying_selected_seat_deselects_it(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        selection_state_handler: SeatSelectionStateHandlerImpl,
    ) -> None:
        event = event_factory()
        engine = await engine_factory(event)
        await engine.toggle_select('0_0')
        await engine.toggle_select('0_1')

        assert await engine.toggle_occupied('0_0') is SeatActionStatus.OCCUPIED

        seat = engine.grid.get_seat('0_0')
        assert seat.is_occupied and not seat.is_selected
        persisted = await selection_state_handler.load(event_id=event.id)
        assert persisted.seat_ids == ('0_1',)
        assert await engine.toggle_select('0_0') is SeatActionStatus.SEAT_OCCUPIED

    @pytest.mark.asyncio
    async def test_occupancy_survives_restart(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        occupied_seat_state_handler: OccupiedSeatStateHandlerImpl,
    ) -> None:
        event = event_factory()
        engine = await engine_factory(event)

        await engine.toggle_occupied('1_1')
        await engine.toggle_occupied('0_1')

        assert await occupied_seat_state_handler.load(event_id=event.id) == ['0_1', '1_1']
        restarted = await engine_factory(event)
        assert restarted.grid.occupied_seat_ids == ['0_1', '1_1']

    @pytest.mark.asyncio
    async def test_release_frees_seat(
        self, engine_factory: EngineFactory, event_factory: Callable[..., Event]
    ) -> None:
        engine = await engine_factory(event_factory())
        await engine.toggle_occupied('1_0')

        assert await engine.toggle_occupied('1_0') is SeatActionStatus.RELEASED
        assert await engine.toggle_select('1_0') is SeatActionStatus.SELECTED

    @pytest.mark.asyncio
    async def test_persisted_occupied_seat_is_dropped_from_selection(
        self,
        engine_factory: EngineFactory,
        event_factory: Callable[..., Event],
        store: InMemoryKeyValueStore,
    ) -> None:
        event = event_factory()
        engine = await engine_factory(event)
        await engine.toggle_select('0_0')
        await engine.toggle_select('1_1')
        # Occupancy written behind the engine's back, e.g. by an interrupted write
        await store.set_string_list(make_occupied_seats_key(event_id=event.id), ['1_1'])

        restarted = await engine_factory(event)

        seat = restarted.grid.get_seat('1_1')
        assert seat.is_occupied and not seat.is_selected
        assert restarted.grid.selected_seat_ids == ['0_0']


@pytest.mark.unit
class TestSeatGridEngineGridShrink:
    @pytest.mark.asyncio
    async def test_entries_outside_smaller_grid_are_dropped(
        self, engine_factory: EngineFactory, event_factory: Callable[..., Event]
    ) -> None:
        big = event_factory(rows=3, columns=3)
        engine = await engine_factory(big)
        await engine.toggle_select('0_0')
        await engine.toggle_select('2_2')
        await engine.toggle_occupied('2_1')

        small = await engine_factory(event_factory(rows=2, columns=2))

        assert small.grid.selected_seat_ids == ['0_0']
        assert small.grid.occupied_seat_ids == []
        assert small.view().selected_count == 1


@pytest.mark.unit
class TestSeatGridEngineConcurrency:
    @pytest.mark.asyncio
    async def test_concurrent_toggles_apply_in_order(
        self, engine_factory: EngineFactory, event_factory: Callable[..., Event]
    ) -> None:
        engine = await engine_factory(event_factory(rows=1, columns=1))

        statuses = await asyncio.gather(*(engine.toggle_select('0_0') for _ in range(5)))

        assert statuses == [
            SeatActionStatus.SELECTED,
            SeatActionStatus.DESELECTED,
            SeatActionStatus.SELECTED,
            SeatActionStatus.DESELECTED,
            SeatActionStatus.SELECTED,
        ]
        assert engine.grid.selected_seat_ids == ['0_0']


@pytest.mark.unit
class TestSeatGridRegistry:
    @pytest.mark.asyncio
    async def test_one_engine_per_event(
        self,
        selection_state_handler: SeatSelectionStateHandlerImpl,
        occupied_seat_state_handler: OccupiedSeatStateHandlerImpl,
        event_factory: Callable[..., Event],
    ) -> None:
        registry = SeatGridRegistry(
            selection_state_handler=selection_state_handler,
            occupied_seat_state_handler=occupied_seat_state_handler,
        )
        a = event_factory(event_id='a')

        first, second = await asyncio.gather(registry.get_engine(a), registry.get_engine(a))
        other = await registry.get_engine(event_factory(event_id='b'))

        assert first is second
        assert other is not first
        assert len(registry) == 2
