"""Load-time validation of the event catalog."""

from typing import Sequence

from campus_seats.platform.exception.exceptions import EventCatalogError
from campus_seats.service.catalog.domain.entity.event_entity import Event


EMPTY_CATALOG_MESSAGE = 'No events available'
INVALID_SEAT_CONFIGURATION_MESSAGE = 'Invalid seat configuration'
INVALID_EVENT_NAME_MESSAGE = 'Invalid event name'

# Row labels run A..Z
MAX_ROWS = 26


class CatalogValidators:
    @staticmethod
    def validate_seat_configuration(event: Event) -> None:
        if event.rows <= 0 or event.columns <= 0 or event.rows > MAX_ROWS:
            raise EventCatalogError(INVALID_SEAT_CONFIGURATION_MESSAGE)

    @staticmethod
    def validate_name(event: Event) -> None:
        if not event.name or not event.name.strip():
            raise EventCatalogError(INVALID_EVENT_NAME_MESSAGE)

    @staticmethod
    def validate_catalog(events: Sequence[Event]) -> None:
        """
        Reject the whole catalog on the first violation.

        Raises:
            EventCatalogError: empty catalog, bad grid size or empty name
        """
        if not events:
            raise EventCatalogError(EMPTY_CATALOG_MESSAGE)

        for event in events:
            CatalogValidators.validate_seat_configuration(event)
            CatalogValidators.validate_name(event)
