"""
Booking error taxonomy

Every failure of the reservation flow is one of these. None of them is
retried automatically; the HTTP layer maps status codes through
CustomBaseError.
"""

from collections.abc import Iterable
from uuid import UUID

from cinema_booking.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
)


class InvalidRequestError(DomainError):
    pass


class SeatNotFoundError(DomainError):
    pass


class SeatUnavailableError(ConflictError):
    def __init__(self, seat_ids: Iterable[UUID]) -> None:
        self.seat_ids = sorted(seat_ids)
        super().__init__(
            'Some seats are no longer available',
            details={'unavailable': [str(seat_id) for seat_id in self.seat_ids]},
        )


class InvalidPromotionError(DomainError):
    pass


class PromotionNotOptedInError(ForbiddenError):
    def __init__(self, message: str = 'User has not opted in to promotions') -> None:
        super().__init__(message)


class InvalidPaymentMethodError(DomainError):
    pass


class PersistenceError(InfrastructureError):
    def __init__(self, message: str = 'Failed to persist booking') -> None:
        super().__init__(message)
