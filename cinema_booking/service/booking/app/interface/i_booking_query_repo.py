from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_booking_number(self, *, booking_id: UUID) -> Optional[int]:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        """Booking with its tickets"""
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: UUID) -> List[Booking]:
        """Bookings of a user with their tickets, newest first"""
        pass
