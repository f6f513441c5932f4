from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinema_booking.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'booking'

    # Store-assigned display number; the UUID7 id is what the API exposes
    booking_number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False, index=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, ForeignKey('user.id'), nullable=False, index=True)
    show_id: Mapped[UUID] = mapped_column(Uuid, ForeignKey('showing.id'), nullable=False)
    promotion_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid, ForeignKey('promotion.id'), nullable=True
    )
    payment_card_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid, ForeignKey('payment_card.id'), nullable=True
    )
    subtotal: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    discount_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    tax_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    booking_fee: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='CONFIRMED', nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    tickets: Mapped[List['TicketModel']] = relationship(
        'TicketModel',
        primaryjoin='BookingModel.id == foreign(TicketModel.booking_id)',
        order_by='TicketModel.seat_label',
        viewonly=True,
        lazy='selectin',
    )


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    booking_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('booking.id'), nullable=False, index=True
    )
    show_id: Mapped[UUID] = mapped_column(Uuid, ForeignKey('showing.id'), nullable=False)
    seat_id: Mapped[UUID] = mapped_column(Uuid, ForeignKey('seat.id'), nullable=False)
    seat_label: Mapped[str] = mapped_column(String(10), nullable=False)
    ticket_category: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
