"""
Campus Seats API

Run with: uvicorn campus_seats.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from campus_seats.platform.app_factory import create_app
from campus_seats.platform.config.core_setting import settings
from campus_seats.platform.config.di import cleanup, container
from campus_seats.platform.config.wire_modules import WIRE_MODULES
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.platform.observability.tracing import TracingConfig
from campus_seats.platform.state.kvrocks_client import kvrocks_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Campus Seats] Starting up...')

    tracing = TracingConfig(service_name='campus-seats')
    tracing.setup()

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Campus Seats] Dependency injection wired')

    if settings.STORAGE_BACKEND == 'kvrocks':
        tracing.instrument_redis()
        await kvrocks_client.initialize()
        Logger.base.info('📡 [Campus Seats] Kvrocks storage ready')
    else:
        Logger.base.info('💾 [Campus Seats] In-memory storage ready')

    yield

    Logger.base.info('🛑 [Campus Seats] Shutting down...')
    await kvrocks_client.disconnect()
    tracing.shutdown()
    container.unwire()
    cleanup()
    Logger.base.info('👋 [Campus Seats] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
