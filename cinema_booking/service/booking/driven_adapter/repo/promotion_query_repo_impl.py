from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_promotion_query_repo import (
    IPromotionQueryRepo,
)
from cinema_booking.service.booking.domain.entity.promotion_entity import Promotion
from cinema_booking.service.booking.driven_adapter.model.pricing_model import PromotionModel


class PromotionQueryRepoImpl(IPromotionQueryRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_by_code(self, *, code: str) -> Optional[Promotion]:
        result = await self.session.execute(
            select(PromotionModel).where(PromotionModel.code == code)
        )
        db_promotion = result.scalar_one_or_none()
        if not db_promotion:
            return None
        return Promotion(
            id=db_promotion.id,
            code=db_promotion.code,
            description=db_promotion.description,
            start_date=db_promotion.start_date,
            end_date=db_promotion.end_date,
            discount_percent=db_promotion.discount_percent,
            discount_amount=db_promotion.discount_amount,
        )
