from abc import ABC, abstractmethod

from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> None:
        """Insert the booking row and one row per ticket"""
        pass
