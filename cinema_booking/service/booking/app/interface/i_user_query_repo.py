from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from cinema_booking.service.booking.domain.entity.user_entity import User


class IUserQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, user_id: UUID) -> Optional[User]:
        pass
