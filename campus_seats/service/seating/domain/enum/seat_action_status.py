"""
Seat Action Status Enum - Domain Value Object

Outcome of a user action on the seat grid. Rejected actions are reported
through these values instead of exceptions.
"""

from enum import Enum


class SeatActionStatus(Enum):
    SELECTED = 'selected'
    DESELECTED = 'deselected'
    SEAT_OCCUPIED = 'seat_occupied'
    SEAT_NOT_FOUND = 'seat_not_found'
    CLEARED = 'cleared'
    OCCUPIED = 'occupied'
    RELEASED = 'released'
