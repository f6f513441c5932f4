"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from cinema_booking.platform.config.core_setting import settings
from cinema_booking.platform.config.di import container
from cinema_booking.platform.config.wire_modules import WIRE_MODULES
from cinema_booking.platform.constant.route_constant import BOOKING_BASE, HEALTH, METRICS
from cinema_booking.platform.exception.exception_handlers import register_exception_handlers
from cinema_booking.platform.observability.tracing import TracingConfig
from cinema_booking.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]] | None = None,
    title_suffix: str = '',
    description: str = 'Cinema seat reservation and pricing',
    service_name: str = settings.SERVICE_NAME,
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    # Use cases resolve Provide[...] markers through the wired container
    container.wire(modules=WIRE_MODULES)

    app.include_router(booking_router, prefix=BOOKING_BASE, tags=['booking'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.SERVICE_NAME}

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
