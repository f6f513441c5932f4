"""
Pricing Engine

Turns ticket line items, an optional promotion and the fee schedule into the
money fields stored on a booking. Steps run in a fixed order and every
intermediate amount is rounded half-up to cents:

1. subtotal            = sum of line item prices
2. discount            = subtotal * percent / 100 + flat, capped at subtotal
3. discounted_subtotal = subtotal - discount (never below zero)
4. tax                 = discounted_subtotal * tax_rate
5. booking_fee         = flat fee, neither taxed nor discounted
6. total               = discounted_subtotal + tax + booking_fee
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from cinema_booking.service.booking.domain.entity.promotion_entity import Promotion
from cinema_booking.service.booking.domain.value_object.price_breakdown import (
    FeeSchedule,
    PriceBreakdown,
)
from cinema_booking.service.booking.domain.value_object.ticket_line_item import TicketLineItem


CENT = Decimal('0.01')
ZERO = Decimal('0.00')
DEFAULT_TAX_RATE = Decimal('0.07')
# Largest amount a NUMERIC(10, 2) money column holds
MAX_AMOUNT = Decimal('99999999.99')


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_discount(*, subtotal: Decimal, promotion: Optional[Promotion]) -> Decimal:
    if promotion is None:
        return ZERO
    percent = promotion.discount_percent or ZERO
    flat = promotion.discount_amount or ZERO
    raw_discount = subtotal * percent / Decimal(100) + flat
    return round_money(max(ZERO, min(raw_discount, subtotal)))


def calculate_price(
    *,
    line_items: Sequence[TicketLineItem],
    promotion: Optional[Promotion],
    fee_schedule: FeeSchedule,
) -> PriceBreakdown:
    subtotal = round_money(sum((item.price for item in line_items), ZERO))
    discount_amount = calculate_discount(subtotal=subtotal, promotion=promotion)
    discounted_subtotal = round_money(max(ZERO, subtotal - discount_amount))
    tax_amount = round_money(discounted_subtotal * fee_schedule.tax_rate)
    booking_fee = round_money(fee_schedule.booking_fee)
    total = round_money(discounted_subtotal + tax_amount + booking_fee)

    return PriceBreakdown(
        subtotal=subtotal,
        discount_amount=discount_amount,
        discounted_subtotal=discounted_subtotal,
        tax_amount=tax_amount,
        booking_fee=booking_fee,
        total=total,
    )


class PricingEngine:
    """Stateless apart from the configured tax rate; safe to share between requests."""

    def __init__(self, *, tax_rate: Decimal = DEFAULT_TAX_RATE) -> None:
        self.tax_rate = Decimal(tax_rate)

    def fee_schedule(self, *, booking_fee: Optional[Decimal]) -> FeeSchedule:
        # No configured fee means no fee
        return FeeSchedule(booking_fee=booking_fee or ZERO, tax_rate=self.tax_rate)

    def price(
        self,
        *,
        line_items: Sequence[TicketLineItem],
        promotion: Optional[Promotion],
        booking_fee: Optional[Decimal],
    ) -> PriceBreakdown:
        return calculate_price(
            line_items=line_items,
            promotion=promotion,
            fee_schedule=self.fee_schedule(booking_fee=booking_fee),
        )
