from collections.abc import Mapping, Sequence
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

import attrs
import uuid_utils

from cinema_booking.service.booking.domain.booking_exceptions import InvalidRequestError
from cinema_booking.service.booking.domain.entity.seat_entity import Seat
from cinema_booking.service.booking.domain.enum.booking_status import BookingStatus
from cinema_booking.service.booking.domain.value_object.price_breakdown import PriceBreakdown
from cinema_booking.service.booking.domain.value_object.ticket_line_item import TicketLineItem


MAX_TICKET_PRICE = Decimal('10000.00')


def _new_id() -> UUID:
    return UUID(str(uuid_utils.uuid7()))


@attrs.define
class Ticket:
    id: UUID
    booking_id: UUID
    show_id: UUID
    seat_id: UUID
    seat_label: str
    ticket_category: str
    price: Decimal


@attrs.define
class Booking:
    id: UUID
    user_id: UUID
    show_id: UUID
    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    booking_fee: Decimal
    total_amount: Decimal
    status: BookingStatus = BookingStatus.CONFIRMED
    promotion_id: Optional[UUID] = None
    payment_card_id: Optional[UUID] = None
    booking_number: Optional[int] = None
    tickets: List[Ticket] = attrs.field(factory=list)
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_line_items(line_items: Sequence[TicketLineItem]) -> None:
        if not line_items:
            raise InvalidRequestError('At least one ticket is required')

        seat_ids = [item.seat_id for item in line_items]
        if len(set(seat_ids)) != len(seat_ids):
            raise InvalidRequestError('Each seat can only be requested once')

        for item in line_items:
            if item.price < 0:
                raise InvalidRequestError(f'Ticket price must not be negative: {item.price}')
            if item.price > MAX_TICKET_PRICE:
                raise InvalidRequestError(
                    f'Ticket price must not exceed {MAX_TICKET_PRICE}: {item.price}'
                )

    @classmethod
    def create(
        cls,
        *,
        user_id: UUID,
        show_id: UUID,
        line_items: Sequence[TicketLineItem],
        seats_by_id: Mapping[UUID, Seat],
        breakdown: PriceBreakdown,
        promotion_id: Optional[UUID] = None,
        payment_card_id: Optional[UUID] = None,
    ) -> 'Booking':
        """New CONFIRMED booking with one ticket per line item, labelled by its seat."""
        booking_id = _new_id()
        tickets = [
            Ticket(
                id=_new_id(),
                booking_id=booking_id,
                show_id=show_id,
                seat_id=item.seat_id,
                seat_label=seats_by_id[item.seat_id].label,
                ticket_category=item.ticket_category.value,
                price=item.price,
            )
            for item in line_items
        ]
        return cls(
            id=booking_id,
            user_id=user_id,
            show_id=show_id,
            subtotal=breakdown.subtotal,
            discount_amount=breakdown.discount_amount,
            tax_amount=breakdown.tax_amount,
            booking_fee=breakdown.booking_fee,
            total_amount=breakdown.total,
            status=BookingStatus.CONFIRMED,
            promotion_id=promotion_id,
            payment_card_id=payment_card_id,
            tickets=tickets,
        )
