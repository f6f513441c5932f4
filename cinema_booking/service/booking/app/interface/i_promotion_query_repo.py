from abc import ABC, abstractmethod
from typing import Optional

from cinema_booking.service.booking.domain.entity.promotion_entity import Promotion


class IPromotionQueryRepo(ABC):
    @abstractmethod
    async def get_by_code(self, *, code: str) -> Optional[Promotion]:
        pass
