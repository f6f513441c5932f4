from decimal import Decimal

import attrs


@attrs.frozen
class FeeSchedule:
    booking_fee: Decimal
    tax_rate: Decimal


@attrs.frozen
class PriceBreakdown:
    subtotal: Decimal
    discount_amount: Decimal
    discounted_subtotal: Decimal
    tax_amount: Decimal
    booking_fee: Decimal
    total: Decimal
