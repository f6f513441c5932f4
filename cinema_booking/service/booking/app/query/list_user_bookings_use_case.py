from typing import List
from uuid import UUID

from fastapi import Depends

from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class ListUserBookingsUseCase:
    """Order history: every booking of a user, newest first. Unknown users get an empty list."""

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow=uow)

    @Logger.io
    async def list_bookings(self, *, user_id: UUID) -> List[Booking]:
        async with self.uow:
            return await self.uow.booking_query_repo.list_by_user(user_id=user_id)
