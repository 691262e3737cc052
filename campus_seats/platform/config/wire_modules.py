"""
Wire Modules Configuration

Modules whose `depends` classmethods use `Provide[Container.xxx]`.
Shared between production and test environments.
"""

from types import ModuleType

from campus_seats.service.booking.app.command import book_seats_use_case, delete_ticket_use_case
from campus_seats.service.booking.app.query import get_ticket_use_case, list_tickets_use_case
from campus_seats.service.catalog.app.query import load_events_use_case
from campus_seats.service.seating.app.command import (
    clear_seat_selection_use_case,
    toggle_seat_occupied_use_case,
    toggle_seat_selection_use_case,
)
from campus_seats.service.seating.app.query import (
    get_seat_grid_use_case,
    render_selection_code_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    load_events_use_case,
    toggle_seat_selection_use_case,
    toggle_seat_occupied_use_case,
    clear_seat_selection_use_case,
    get_seat_grid_use_case,
    render_selection_code_use_case,
    book_seats_use_case,
    delete_ticket_use_case,
    list_tickets_use_case,
    get_ticket_use_case,
]
