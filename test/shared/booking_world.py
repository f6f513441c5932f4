"""
Seed data shared by integration and BDD tests.

`seed_booking_world` works on a synchronous Session so it can run both from
sync BDD steps and from async tests through `AsyncSession.run_sync`. It does
not commit; callers do.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session
import uuid_utils

from cinema_booking.service.booking.domain.entity.showing_entity import Showroom
from cinema_booking.service.booking.domain.seat_template import generate_seats
from cinema_booking.service.booking.driven_adapter.model import (
    BookingFeeModel,
    BookingModel,
    PaymentCardModel,
    PromotionModel,
    SeatModel,
    ShowingModel,
    ShowroomModel,
    TicketModel,
    UserModel,
)


ACTIVE_PROMO_CODE = 'SAVE10PLUS5'  # 10% + $5.00
PERCENT_ONLY_PROMO_CODE = 'HALFOFF'  # 50%
EXPIRED_PROMO_CODE = 'LASTYEAR'
FUTURE_PROMO_CODE = 'NEXTMONTH'
DEFAULT_BOOKING_FEE = Decimal('2.00')
VALID_NEW_CARD = {'card_number': '4111111111111111', 'expiration_date': '12/99', 'cvv': '123'}


def new_id() -> UUID:
    return UUID(str(uuid_utils.uuid7()))


@dataclass
class BookingWorld:
    showroom_id: UUID
    show_id: UUID
    unseeded_show_id: UUID
    opted_in_user_id: UUID
    opted_out_user_id: UUID
    opted_in_card_id: UUID
    opted_out_card_id: UUID
    seat_ids: dict[str, UUID] = field(default_factory=dict)  # 'A1' -> seat id


def seed_booking_world(
    session: Session,
    *,
    booking_fee: Optional[Decimal] = DEFAULT_BOOKING_FEE,
    today: Optional[date] = None,
    rows: int = 3,
    seats_per_row: int = 4,
) -> BookingWorld:
    today = today or datetime.now(timezone.utc).date()

    showroom = Showroom(id=new_id(), name='Hall 1', row_count=rows, seats_per_row=seats_per_row)
    session.add(
        ShowroomModel(
            id=showroom.id,
            name=showroom.name,
            row_count=showroom.row_count,
            seats_per_row=showroom.seats_per_row,
        )
    )

    starts_at = datetime.now(timezone.utc) + timedelta(days=1)
    show_id, unseeded_show_id = new_id(), new_id()
    session.add_all(
        [
            ShowingModel(
                id=show_id, movie_title='Arrival', showroom_id=showroom.id, starts_at=starts_at
            ),
            ShowingModel(
                id=unseeded_show_id,
                movie_title='Dune',
                showroom_id=showroom.id,
                starts_at=starts_at + timedelta(hours=3),
            ),
        ]
    )
    session.flush()

    seats = generate_seats(show_id=show_id, showroom=showroom)
    session.add_all(
        SeatModel(
            id=seat.id,
            show_id=seat.show_id,
            row_label=seat.row_label,
            seat_number=seat.seat_number,
            is_available=True,
        )
        for seat in seats
    )

    opted_in_user_id, opted_out_user_id = new_id(), new_id()
    session.add_all(
        [
            UserModel(id=opted_in_user_id, email='fan@cinema.test', promo_opt_in=True),
            UserModel(id=opted_out_user_id, email='quiet@cinema.test', promo_opt_in=False),
        ]
    )
    session.flush()

    opted_in_card_id, opted_out_card_id = new_id(), new_id()
    session.add_all(
        [
            PaymentCardModel(
                id=opted_in_card_id,
                user_id=opted_in_user_id,
                card_type='visa',
                last_four='1111',
                expiration_date='12/99',
            ),
            PaymentCardModel(
                id=opted_out_card_id,
                user_id=opted_out_user_id,
                card_type='mastercard',
                last_four='4444',
                expiration_date='12/99',
            ),
        ]
    )

    session.add_all(
        [
            PromotionModel(
                id=new_id(),
                code=ACTIVE_PROMO_CODE,
                description='10% off plus $5',
                start_date=today - timedelta(days=1),
                end_date=today + timedelta(days=30),
                discount_percent=Decimal('10'),
                discount_amount=Decimal('5.00'),
            ),
            PromotionModel(
                id=new_id(),
                code=PERCENT_ONLY_PROMO_CODE,
                description='Half price',
                start_date=today,
                end_date=today,
                discount_percent=Decimal('50'),
            ),
            PromotionModel(
                id=new_id(),
                code=EXPIRED_PROMO_CODE,
                start_date=today - timedelta(days=60),
                end_date=today - timedelta(days=30),
                discount_amount=Decimal('5.00'),
            ),
            PromotionModel(
                id=new_id(),
                code=FUTURE_PROMO_CODE,
                start_date=today + timedelta(days=30),
                end_date=today + timedelta(days=60),
                discount_percent=Decimal('20'),
            ),
        ]
    )

    if booking_fee is not None:
        session.add(BookingFeeModel(amount=booking_fee))
    session.flush()

    return BookingWorld(
        showroom_id=showroom.id,
        show_id=show_id,
        unseeded_show_id=unseeded_show_id,
        opted_in_user_id=opted_in_user_id,
        opted_out_user_id=opted_out_user_id,
        opted_in_card_id=opted_in_card_id,
        opted_out_card_id=opted_out_card_id,
        seat_ids={seat.label: seat.id for seat in seats},
    )


def mark_seats_taken(session: Session, seat_ids: list[UUID]) -> None:
    for seat_id in seat_ids:
        db_seat = session.get(SeatModel, seat_id)
        assert db_seat is not None
        db_seat.is_available = False
    session.flush()


def seat_availability(session: Session, seat_ids: list[UUID]) -> dict[UUID, bool]:
    rows = session.execute(
        select(SeatModel.id, SeatModel.is_available).where(SeatModel.id.in_(seat_ids))
    ).all()
    return {seat_id: is_available for seat_id, is_available in rows}


def count_rows(session: Session) -> dict[str, int]:
    return {
        'booking': session.scalar(select(func.count()).select_from(BookingModel)) or 0,
        'ticket': session.scalar(select(func.count()).select_from(TicketModel)) or 0,
    }
