from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs


@attrs.frozen
class ReservationResult:
    booking_id: UUID
    booking_number: Optional[int]
    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    booking_fee: Decimal
    total_amount: Decimal
