"""
Production FastAPI Application

Booking service: seat maps, seat reservation with pricing, booking lookup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from cinema_booking.platform.app_factory import create_app
from cinema_booking.platform.config.core_setting import settings
from cinema_booking.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_engine,
)
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Booking Service] Starting up...')

    tracing = TracingConfig(service_name=settings.SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [Booking Service] OpenTelemetry tracing configured')

    tracing.instrument_sqlalchemy(engine=get_engine())
    await create_db_and_tables()
    Logger.base.info('🗄️  [Booking Service] Database engine ready + tables ensured')

    Logger.base.info('✅ [Booking Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Booking Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Booking Service] Database engine disposed')

    tracing.shutdown()
    Logger.base.info('👋 [Booking Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
