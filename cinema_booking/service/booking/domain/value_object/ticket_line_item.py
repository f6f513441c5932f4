from decimal import Decimal
from uuid import UUID

import attrs

from cinema_booking.service.booking.domain.enum.ticket_category import TicketCategory


@attrs.frozen
class TicketLineItem:
    """One requested ticket: a single seat at the price of its fare category."""

    seat_id: UUID
    ticket_category: TicketCategory
    price: Decimal
