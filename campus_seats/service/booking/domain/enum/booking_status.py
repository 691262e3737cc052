from enum import Enum


class BookingStatus(Enum):
    BOOKED = 'booked'
    NOTHING_SELECTED = 'nothing_selected'
