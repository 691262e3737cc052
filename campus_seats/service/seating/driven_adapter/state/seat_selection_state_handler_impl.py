from typing import Optional

from opentelemetry import trace

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.seating.app.interface.i_seat_selection_state_handler import (
    ISeatSelectionStateHandler,
)
from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection
from campus_seats.service.seating.driven_adapter.state.selection_codec import (
    SelectionDecodeError,
    decode_selection,
    encode_selection,
)
from campus_seats.service.shared_kernel.app.interface.i_key_value_store import IKeyValueStore
from campus_seats.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_selected_seat_key,
)


class SeatSelectionStateHandlerImpl(ISeatSelectionStateHandler):
    """
    Storage Format:
        Key: selectedSeat_{event_id}
        Value: JSON {event_id, selected_seats: [{id, seat_id, seat_label, selected_at}], created_at}
    """

    def __init__(self, *, store: IKeyValueStore) -> None:
        self.store = store
        self.tracer = trace.get_tracer(__name__)

    async def load(self, *, event_id: str) -> Optional[SeatSelection]:
        with self.tracer.start_as_current_span(
            'state.selection.load', attributes={'event.id': event_id}
        ):
            raw = await self.store.get(make_selected_seat_key(event_id=event_id))
            if raw is None:
                return None
            try:
                selection = decode_selection(raw)
            except SelectionDecodeError as e:
                Logger.base.warning(f'⚠️ [SELECTION] {event_id}: unreadable selection ignored ({e})')
                return None

            if selection.event_id != event_id:
                Logger.base.warning(
                    f'⚠️ [SELECTION] {event_id}: stored selection belongs to {selection.event_id}, ignored'
                )
                return None
            return selection

    async def save(self, *, selection: SeatSelection) -> None:
        with self.tracer.start_as_current_span(
            'state.selection.save', attributes={'event.id': selection.event_id}
        ):
            await self.store.set(
                make_selected_seat_key(event_id=selection.event_id), encode_selection(selection)
            )

    async def delete(self, *, event_id: str) -> None:
        with self.tracer.start_as_current_span(
            'state.selection.delete', attributes={'event.id': event_id}
        ):
            await self.store.delete(make_selected_seat_key(event_id=event_id))
