from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from cinema_booking.service.booking.domain.entity.showing_entity import Showing


class IShowingQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, show_id: UUID) -> Optional[Showing]:
        """Showing together with its showroom template"""
        pass
