from uuid import UUID

from fastapi import Depends

from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.exception.exceptions import NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow=uow)

    @Logger.io
    async def get_booking(self, *, booking_id: UUID) -> Booking:
        async with self.uow:
            booking = await self.uow.booking_query_repo.get_by_id(booking_id=booking_id)

            if not booking:
                raise NotFoundError('Booking not found')

            return booking
