from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from cinema_booking.service.booking.domain.entity.payment_card_entity import PaymentCard


class IPaymentCardQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, payment_card_id: UUID) -> Optional[PaymentCard]:
        pass
