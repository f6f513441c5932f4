from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_payment_card_query_repo import (
    IPaymentCardQueryRepo,
)
from cinema_booking.service.booking.domain.entity.payment_card_entity import PaymentCard
from cinema_booking.service.booking.driven_adapter.model.user_model import PaymentCardModel


class PaymentCardQueryRepoImpl(IPaymentCardQueryRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_by_id(self, *, payment_card_id: UUID) -> Optional[PaymentCard]:
        result = await self.session.execute(
            select(PaymentCardModel).where(PaymentCardModel.id == payment_card_id)
        )
        db_card = result.scalar_one_or_none()
        if not db_card:
            return None
        return PaymentCard(
            id=db_card.id,
            user_id=db_card.user_id,
            card_type=db_card.card_type,
            last_four=db_card.last_four,
            expiration_date=db_card.expiration_date,
        )
