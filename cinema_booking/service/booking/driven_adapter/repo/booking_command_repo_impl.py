from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_command_repo import (
    IBookingCommandRepo,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.driven_adapter.model.booking_model import (
    BookingModel,
    TicketModel,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def create(self, *, booking: Booking) -> None:
        self.session.add(
            BookingModel(
                id=booking.id,
                user_id=booking.user_id,
                show_id=booking.show_id,
                promotion_id=booking.promotion_id,
                payment_card_id=booking.payment_card_id,
                subtotal=booking.subtotal,
                discount_amount=booking.discount_amount,
                tax_amount=booking.tax_amount,
                booking_fee=booking.booking_fee,
                total_amount=booking.total_amount,
                status=booking.status.value,
            )
        )
        # Booking row first: tickets reference booking.id
        await self.session.flush()

        self.session.add_all(
            TicketModel(
                id=ticket.id,
                booking_id=ticket.booking_id,
                show_id=ticket.show_id,
                seat_id=ticket.seat_id,
                seat_label=ticket.seat_label,
                ticket_category=ticket.ticket_category,
                price=ticket.price,
            )
            for ticket in booking.tickets
        )
        await self.session.flush()
