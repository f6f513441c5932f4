"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from cinema_booking.service.booking.app.command import reserve_seats_use_case
from cinema_booking.service.booking.app.query import list_showing_seats_use_case


WIRE_MODULES: list[ModuleType] = [
    reserve_seats_use_case,
    list_showing_seats_use_case,
]
