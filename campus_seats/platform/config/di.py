"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from campus_seats.platform.config.core_setting import Settings, settings
from campus_seats.platform.state.kvrocks_client import kvrocks_client
from campus_seats.service.booking.driven_adapter.state.ticket_state_handler_impl import (
    TicketStateHandlerImpl,
)
from campus_seats.service.catalog.driven_adapter.demo_event_catalog_impl import (
    DemoEventCatalogImpl,
)
from campus_seats.service.seating.app.command.seat_grid_registry import SeatGridRegistry
from campus_seats.service.seating.driven_adapter.state.occupied_seat_state_handler_impl import (
    OccupiedSeatStateHandlerImpl,
)
from campus_seats.service.seating.driven_adapter.state.seat_selection_state_handler_impl import (
    SeatSelectionStateHandlerImpl,
)
from campus_seats.service.shared_kernel.driven_adapter.qr_code_renderer_impl import (
    QrCodeRendererImpl,
)
from campus_seats.service.shared_kernel.driven_adapter.state.in_memory_key_value_store import (
    InMemoryKeyValueStore,
)
from campus_seats.service.shared_kernel.driven_adapter.state.kvrocks_key_value_store import (
    KvrocksKeyValueStore,
)


def _storage_backend() -> str:
    return settings.STORAGE_BACKEND


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Persistence substrate, picked by STORAGE_BACKEND
    key_value_store = providers.Selector(
        providers.Callable(_storage_backend),
        memory=providers.Singleton(InMemoryKeyValueStore),
        kvrocks=providers.Singleton(KvrocksKeyValueStore, client_holder=kvrocks_client),
    )

    # Catalog (static demo data behind simulated latency)
    event_catalog = providers.Singleton(
        DemoEventCatalogImpl,
        delay_seconds=config_service.provided.CATALOG_LOAD_DELAY_SECONDS,
    )

    # State handlers (one per persisted facet)
    seat_selection_state_handler = providers.Singleton(
        SeatSelectionStateHandlerImpl, store=key_value_store
    )
    occupied_seat_state_handler = providers.Singleton(
        OccupiedSeatStateHandlerImpl, store=key_value_store
    )
    ticket_state_handler = providers.Singleton(TicketStateHandlerImpl, store=key_value_store)

    # One engine per event; Singleton so requests share the live grids
    seat_grid_registry = providers.Singleton(
        SeatGridRegistry,
        selection_state_handler=seat_selection_state_handler,
        occupied_seat_state_handler=occupied_seat_state_handler,
    )

    code_renderer = providers.Singleton(
        QrCodeRendererImpl,
        box_size=config_service.provided.QR_BOX_SIZE,
        border=config_service.provided.QR_BORDER,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
