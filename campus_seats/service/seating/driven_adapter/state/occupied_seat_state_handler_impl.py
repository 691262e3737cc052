from typing import List

from campus_seats.service.seating.app.interface.i_occupied_seat_state_handler import (
    IOccupiedSeatStateHandler,
)
from campus_seats.service.shared_kernel.app.interface.i_key_value_store import IKeyValueStore
from campus_seats.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_occupied_seats_key,
)


class OccupiedSeatStateHandlerImpl(IOccupiedSeatStateHandler):
    """
    Storage Format:
        Key: occupiedSeats_{event_id}
        Value: JSON array of seat ids ("{row}_{column}")
    """

    def __init__(self, *, store: IKeyValueStore) -> None:
        self.store = store

    async def load(self, *, event_id: str) -> List[str]:
        return await self.store.get_string_list(make_occupied_seats_key(event_id=event_id))

    async def save(self, *, event_id: str, seat_ids: List[str]) -> None:
        await self.store.set_string_list(make_occupied_seats_key(event_id=event_id), seat_ids)
