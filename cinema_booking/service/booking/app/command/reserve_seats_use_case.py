import time
from collections.abc import Callable, Sequence
from datetime import date, datetime, timezone
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from cinema_booking.platform.config.di import Container
from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.platform.metrics.booking_metrics import BookingMetrics
from cinema_booking.service.booking.app.command.seed_showing_seats import seed_seats_if_empty
from cinema_booking.service.booking.app.dto.reservation_result import ReservationResult
from cinema_booking.service.booking.domain.booking_exceptions import (
    InvalidPaymentMethodError,
    InvalidPromotionError,
    InvalidRequestError,
    PersistenceError,
    PromotionNotOptedInError,
    SeatNotFoundError,
    SeatUnavailableError,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.entity.promotion_entity import Promotion
from cinema_booking.service.booking.domain.entity.seat_entity import Seat
from cinema_booking.service.booking.domain.entity.user_entity import User
from cinema_booking.service.booking.domain.pricing_engine import MAX_AMOUNT, PricingEngine
from cinema_booking.service.booking.domain.value_object.payment_method import (
    NewCardDetails,
    PaymentMethod,
    SavedCard,
)
from cinema_booking.service.booking.domain.value_object.ticket_line_item import TicketLineItem


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ReserveSeatsUseCase:
    """
    Reserve seats for a showing and create a confirmed booking.

    Flow (one transaction, any failure rolls back everything):
    1. Validate the ticket list and the user
    2. Seed the showing's seats from its showroom template if it has none
    3. Lock the requested seats, check they exist and are free, flip them
    4. Resolve the promotion (code, validity window, user opt-in)
    5. Read the current booking fee (0 when none is configured)
    6. Price the line items
    7. Resolve the payment method
    8. Insert the booking and its tickets, commit

    After commit the store-assigned booking number is read for display only.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        pricing_engine: PricingEngine,
        booking_metrics: BookingMetrics,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self.uow = uow
        self.pricing_engine = pricing_engine
        self.booking_metrics = booking_metrics
        self.today = today
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        pricing_engine: PricingEngine = Depends(Provide[Container.pricing_engine]),
        booking_metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(uow=uow, pricing_engine=pricing_engine, booking_metrics=booking_metrics)

    @Logger.io
    async def reserve(
        self,
        *,
        user_id: UUID,
        show_id: UUID,
        line_items: Sequence[TicketLineItem],
        payment: PaymentMethod,
        promotion_code: Optional[str] = None,
    ) -> ReservationResult:
        started_at = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.reserve_seats',
            attributes={
                'user.id': str(user_id),
                'show.id': str(show_id),
                'ticket.count': len(line_items),
            },
        ) as span:
            try:
                result = await self._reserve(
                    user_id=user_id,
                    show_id=show_id,
                    line_items=line_items,
                    payment=payment,
                    promotion_code=promotion_code,
                )
            except Exception as e:
                self.booking_metrics.record_seat_reservation(
                    result=type(e).__name__, duration=time.perf_counter() - started_at
                )
                raise

            self.booking_metrics.record_seat_reservation(
                result='confirmed',
                duration=time.perf_counter() - started_at,
                seat_count=len(line_items),
            )
            span.set_attribute('booking.id', str(result.booking_id))
            return result

    async def _reserve(
        self,
        *,
        user_id: UUID,
        show_id: UUID,
        line_items: Sequence[TicketLineItem],
        payment: PaymentMethod,
        promotion_code: Optional[str],
    ) -> ReservationResult:
        # Step 1: reject malformed requests before touching any row
        Booking.validate_line_items(line_items)
        seat_ids = [item.seat_id for item in line_items]

        try:
            async with self.uow:
                user = await self.uow.user_query_repo.get_by_id(user_id=user_id)
                if not user:
                    raise InvalidRequestError(f'User {user_id} not found')

                # Steps 2-3: seat inventory
                await self._ensure_seats(show_id=show_id)
                seats = await self._lock_and_claim_seats(show_id=show_id, seat_ids=seat_ids)

                # Steps 4-6: pricing inputs and pricing
                promotion = await self._resolve_promotion(code=promotion_code, user=user)
                booking_fee = await self.uow.booking_fee_query_repo.get_current_fee()
                breakdown = self.pricing_engine.price(
                    line_items=line_items, promotion=promotion, booking_fee=booking_fee
                )
                if breakdown.total > MAX_AMOUNT:
                    raise InvalidRequestError(f'Booking total {breakdown.total} is out of range')

                # Step 7
                payment_card_id = await self._resolve_payment(payment=payment, user_id=user_id)

                # Step 8
                booking = Booking.create(
                    user_id=user_id,
                    show_id=show_id,
                    line_items=line_items,
                    seats_by_id={seat.id: seat for seat in seats},
                    breakdown=breakdown,
                    promotion_id=promotion.id if promotion else None,
                    payment_card_id=payment_card_id,
                )
                await self.uow.booking_command_repo.create(booking=booking)
                await self.uow.commit()
        except SQLAlchemyError as e:
            Logger.base.error(f'💥 [RESERVE] Transaction rolled back for showing {show_id}: {e}')
            raise PersistenceError() from e

        Logger.base.info(
            f'🎟️ [RESERVE] Booking {booking.id} confirmed: {len(seat_ids)} seats '
            f'for showing {show_id}, total {breakdown.total}'
        )

        booking_number = await self._lookup_booking_number(booking_id=booking.id)
        return ReservationResult(
            booking_id=booking.id,
            booking_number=booking_number,
            subtotal=breakdown.subtotal,
            discount_amount=breakdown.discount_amount,
            tax_amount=breakdown.tax_amount,
            booking_fee=breakdown.booking_fee,
            total_amount=breakdown.total,
        )

    async def _ensure_seats(self, *, show_id: UUID) -> None:
        showing = await self.uow.showing_query_repo.get_by_id(show_id=show_id)
        if not showing:
            raise SeatNotFoundError(f'Showing {show_id} not found')
        if await seed_seats_if_empty(uow=self.uow, showing=showing):
            self.booking_metrics.record_seat_template_seeded()

    async def _lock_and_claim_seats(self, *, show_id: UUID, seat_ids: list[UUID]) -> list[Seat]:
        seats = await self.uow.seat_inventory_repo.lock_seats(show_id=show_id, seat_ids=seat_ids)
        if len(seats) != len(seat_ids):
            raise SeatNotFoundError('One or more seats do not exist for this showing')

        taken = [seat.id for seat in seats if not seat.is_available]
        if taken:
            raise SeatUnavailableError(taken)

        claimed = await self.uow.seat_inventory_repo.mark_unavailable(
            show_id=show_id, seat_ids=seat_ids
        )
        if len(claimed) != len(seat_ids):
            # Another transaction claimed seats between the read and the update
            raise SeatUnavailableError(set(seat_ids) - set(claimed))
        return seats

    async def _resolve_promotion(self, *, code: Optional[str], user: User) -> Optional[Promotion]:
        if code is None:
            return None

        promotion = await self.uow.promotion_query_repo.get_by_code(code=code)
        if not promotion or promotion.code != code:
            raise InvalidPromotionError(f'Promotion code {code!r} is not valid')
        if not promotion.is_active_on(self.today()):
            raise InvalidPromotionError(f'Promotion code {code!r} is expired or not yet active')
        if not user.promo_opt_in:
            raise PromotionNotOptedInError()
        return promotion

    async def _resolve_payment(self, *, payment: PaymentMethod, user_id: UUID) -> Optional[UUID]:
        if isinstance(payment, SavedCard):
            card = await self.uow.payment_card_query_repo.get_by_id(
                payment_card_id=payment.payment_card_id
            )
            if not card or not card.belongs_to(user_id):
                raise InvalidPaymentMethodError('Payment card does not belong to this user')
            return card.id

        if isinstance(payment, NewCardDetails):
            if payment.is_expired_on(self.today()):
                raise InvalidPaymentMethodError('Card has expired')
            Logger.base.info(f'💳 [RESERVE] New card ending {payment.last_four} accepted')
            # Transient card: charged but never stored by a reservation
            return None

        raise InvalidPaymentMethodError('Unsupported payment method')

    async def _lookup_booking_number(self, *, booking_id: UUID) -> Optional[int]:
        try:
            return await self.uow.booking_query_repo.get_booking_number(booking_id=booking_id)
        except SQLAlchemyError as e:
            # The booking is committed; the number is only for display
            Logger.base.warning(f'⚠️ [RESERVE] Booking number lookup failed for {booking_id}: {e}')
            return None
