"""
Storage keys for the three persisted facets.

The prefix comes from settings so parallel test runs against one Kvrocks
instance do not collide.
"""

from campus_seats.platform.config.core_setting import settings


SELECTED_SEAT_KEY_PREFIX = 'selectedSeat_'
OCCUPIED_SEATS_KEY_PREFIX = 'occupiedSeats_'
SAVED_TICKETS_KEY = 'savedTickets'


def _make_key(key: str) -> str:
    return f'{settings.KVROCKS_KEY_PREFIX}{key}'


def make_selected_seat_key(*, event_id: str) -> str:
    """Pending seat selection of one event"""
    return _make_key(f'{SELECTED_SEAT_KEY_PREFIX}{event_id}')


def make_occupied_seats_key(*, event_id: str) -> str:
    """Flat list of occupied seat ids of one event"""
    return _make_key(f'{OCCUPIED_SEATS_KEY_PREFIX}{event_id}')


def make_saved_tickets_key() -> str:
    """Single global key holding the whole ticket collection"""
    return _make_key(SAVED_TICKETS_KEY)
