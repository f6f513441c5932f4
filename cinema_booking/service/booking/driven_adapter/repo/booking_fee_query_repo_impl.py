from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_fee_query_repo import (
    IBookingFeeQueryRepo,
)
from cinema_booking.service.booking.driven_adapter.model.pricing_model import BookingFeeModel


class BookingFeeQueryRepoImpl(IBookingFeeQueryRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_current_fee(self) -> Optional[Decimal]:
        result = await self.session.execute(
            select(BookingFeeModel.amount)
            .order_by(BookingFeeModel.created_at.desc(), BookingFeeModel.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()
