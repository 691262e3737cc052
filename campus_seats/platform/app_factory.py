"""
Shared FastAPI App Factory

Common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_seats.platform.config.core_setting import settings
from campus_seats.platform.exception.exception_handlers import register_exception_handlers
from campus_seats.platform.observability.tracing import TracingConfig
from campus_seats.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from campus_seats.service.catalog.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from campus_seats.service.seating.driving_adapter.http_controller.seat_grid_controller import (
    router as seat_grid_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]] | None = None,
    title_suffix: str = '',
    service_name: str = 'campus-seats',
) -> FastAPI:
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description='Campus event seat selection and tickets',
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(event_router, prefix='/api/events', tags=['event'])
    app.include_router(seat_grid_router, prefix='/api/events', tags=['seat'])
    app.include_router(booking_router, prefix='/api', tags=['booking'])

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'storage_backend': settings.STORAGE_BACKEND}

    return app
