"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from cinema_booking.service.booking.driven_adapter.model.booking_model import (
    BookingModel,
    TicketModel,
)
from cinema_booking.service.booking.driven_adapter.model.pricing_model import (
    BookingFeeModel,
    PromotionModel,
)
from cinema_booking.service.booking.driven_adapter.model.seat_model import SeatModel
from cinema_booking.service.booking.driven_adapter.model.showing_model import (
    ShowingModel,
    ShowroomModel,
)
from cinema_booking.service.booking.driven_adapter.model.user_model import (
    PaymentCardModel,
    UserModel,
)

__all__ = [
    'BookingFeeModel',
    'BookingModel',
    'PaymentCardModel',
    'PromotionModel',
    'SeatModel',
    'ShowingModel',
    'ShowroomModel',
    'TicketModel',
    'UserModel',
]
