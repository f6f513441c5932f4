"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from cinema_booking.platform.config.core_setting import Settings
from cinema_booking.platform.metrics.booking_metrics import BookingMetrics, metrics
from cinema_booking.service.booking.domain.pricing_engine import PricingEngine


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Pricing is pure; one engine per process configured with the tax rate
    pricing_engine = providers.Singleton(
        PricingEngine,
        tax_rate=config_service.provided.BOOKING_TAX_RATE,
    )

    # Prometheus collectors register globally, so reuse the module instance
    booking_metrics: providers.Provider[BookingMetrics] = providers.Object(metrics)


container = Container()
