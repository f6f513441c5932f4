from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from cinema_booking.service.booking.domain.entity.booking_entity import Booking, Ticket
from cinema_booking.service.booking.domain.enum.booking_status import BookingStatus
from cinema_booking.service.booking.driven_adapter.model.booking_model import BookingModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            booking_number=db_booking.booking_number,
            user_id=db_booking.user_id,
            show_id=db_booking.show_id,
            subtotal=db_booking.subtotal,
            discount_amount=db_booking.discount_amount,
            tax_amount=db_booking.tax_amount,
            booking_fee=db_booking.booking_fee,
            total_amount=db_booking.total_amount,
            status=BookingStatus(db_booking.status),
            promotion_id=db_booking.promotion_id,
            payment_card_id=db_booking.payment_card_id,
            created_at=db_booking.created_at,
            tickets=[
                Ticket(
                    id=db_ticket.id,
                    booking_id=db_ticket.booking_id,
                    show_id=db_ticket.show_id,
                    seat_id=db_ticket.seat_id,
                    seat_label=db_ticket.seat_label,
                    ticket_category=db_ticket.ticket_category,
                    price=db_ticket.price,
                )
                for db_ticket in db_booking.tickets
            ],
        )

    @Logger.io
    async def get_booking_number(self, *, booking_id: UUID) -> Optional[int]:
        result = await self.session.execute(
            select(BookingModel.booking_number).where(BookingModel.id == booking_id)
        )
        return result.scalar_one_or_none()

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        result = await self.session.execute(
            select(BookingModel).where(BookingModel.id == booking_id)
        )
        db_booking = result.scalar_one_or_none()
        if not db_booking:
            return None
        return self._to_entity(db_booking)

    @Logger.io
    async def list_by_user(self, *, user_id: UUID) -> List[Booking]:
        result = await self.session.execute(
            select(BookingModel)
            .where(BookingModel.user_id == user_id)
            .order_by(BookingModel.created_at.desc(), BookingModel.booking_number.desc())
        )
        return [self._to_entity(db_booking) for db_booking in result.scalars().all()]
