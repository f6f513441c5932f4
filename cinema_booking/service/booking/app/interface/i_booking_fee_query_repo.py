from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional


class IBookingFeeQueryRepo(ABC):
    @abstractmethod
    async def get_current_fee(self) -> Optional[Decimal]:
        """Amount of the most recently configured fee, None when nothing is configured"""
        pass
