from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from cinema_booking.service.booking.domain.entity.seat_entity import Seat


class ISeatInventoryRepo(ABC):
    """Seat rows of a showing. Writes only happen inside the caller's transaction."""

    @abstractmethod
    async def count_for_showing(self, *, show_id: UUID) -> int:
        pass

    @abstractmethod
    async def create_many(self, *, seats: List[Seat]) -> None:
        pass

    @abstractmethod
    async def list_for_showing(self, *, show_id: UUID) -> List[Seat]:
        pass

    @abstractmethod
    async def lock_seats(self, *, show_id: UUID, seat_ids: List[UUID]) -> List[Seat]:
        """
        Lock the requested seats of the showing with one locking read.

        Only seats that exist for the showing are returned; locks are held
        until the enclosing transaction ends.
        """
        pass

    @abstractmethod
    async def mark_unavailable(self, *, show_id: UUID, seat_ids: List[UUID]) -> List[UUID]:
        """Flip still-available seats of the showing to unavailable; returns the ids it flipped"""
        pass
