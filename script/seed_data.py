#!/usr/bin/env python3
"""
Database Seed Script
Populate a local database with a demo catalogue

Features:
1. Create Showroom + Showings - one 8x12 hall, two showings of it
2. Generate Seats - only for the first showing; the second is seeded by the API on first access
3. Create Users + Cards - an opted-in and an opted-out user, each with a saved card
4. Create Promotions + Booking Fee

Notes:
- Runs against DATABASE_URL (or the POSTGRES_* settings)
- Re-running is a no-op once the demo users exist
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import uuid_utils

from cinema_booking.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_session_maker,
)
from cinema_booking.service.booking.domain.entity.showing_entity import Showroom
from cinema_booking.service.booking.domain.seat_template import generate_seats
from cinema_booking.service.booking.driven_adapter.model import (
    BookingFeeModel,
    PaymentCardModel,
    PromotionModel,
    SeatModel,
    ShowingModel,
    ShowroomModel,
    UserModel,
)


DEMO_BOOKING_FEE = Decimal('1.50')


@dataclass
class UserConfig:
    """User seed configuration"""

    email: str
    promo_opt_in: bool
    card_type: str
    last_four: str


DEMO_USERS = [
    UserConfig(email='fan@cinema.demo', promo_opt_in=True, card_type='visa', last_four='4242'),
    UserConfig(email='quiet@cinema.demo', promo_opt_in=False, card_type='amex', last_four='0005'),
]


@dataclass
class SeedSummary:
    show_ids: list[UUID]
    user_ids: dict[str, UUID]
    card_ids: dict[str, UUID]
    promotion_codes: list[str]


def _new_id() -> UUID:
    return UUID(str(uuid_utils.uuid7()))


async def _already_seeded(session: AsyncSession) -> bool:
    result = await session.execute(
        select(UserModel.id).where(UserModel.email == DEMO_USERS[0].email)
    )
    return result.scalar_one_or_none() is not None


async def create_showings(session: AsyncSession) -> list[UUID]:
    print('🎬 Creating showroom and showings...')
    showroom = Showroom(id=_new_id(), name='Screen 1', row_count=8, seats_per_row=12)
    session.add(
        ShowroomModel(
            id=showroom.id,
            name=showroom.name,
            row_count=showroom.row_count,
            seats_per_row=showroom.seats_per_row,
        )
    )

    tonight = datetime.now(timezone.utc).replace(hour=20, minute=0, second=0, microsecond=0)
    showings = [
        ShowingModel(
            id=_new_id(), movie_title='Arrival', showroom_id=showroom.id, starts_at=tonight
        ),
        ShowingModel(
            id=_new_id(),
            movie_title='Dune',
            showroom_id=showroom.id,
            starts_at=tonight + timedelta(days=1),
        ),
    ]
    session.add_all(showings)
    await session.flush()

    seats = generate_seats(show_id=showings[0].id, showroom=showroom)
    session.add_all(
        SeatModel(
            id=seat.id,
            show_id=seat.show_id,
            row_label=seat.row_label,
            seat_number=seat.seat_number,
            is_available=seat.is_available,
        )
        for seat in seats
    )
    await session.flush()

    for showing in showings:
        print(f'   ✅ Showing {showing.movie_title}: ID={showing.id}')
    print(f'   ✅ Generated {len(seats)} seats for {showings[0].movie_title}')
    return [showing.id for showing in showings]


async def create_users(session: AsyncSession) -> tuple[dict[str, UUID], dict[str, UUID]]:
    print(f'👥 Creating {len(DEMO_USERS)} users...')
    user_ids: dict[str, UUID] = {}
    card_ids: dict[str, UUID] = {}

    for config in DEMO_USERS:
        user_id, card_id = _new_id(), _new_id()
        session.add(UserModel(id=user_id, email=config.email, promo_opt_in=config.promo_opt_in))
        await session.flush()
        session.add(
            PaymentCardModel(
                id=card_id,
                user_id=user_id,
                card_type=config.card_type,
                last_four=config.last_four,
                expiration_date='12/30',
            )
        )
        user_ids[config.email] = user_id
        card_ids[config.email] = card_id
        print(f'   ✅ {config.email}: ID={user_id}, card={card_id}')

    await session.flush()
    return user_ids, card_ids


async def create_pricing(session: AsyncSession) -> list[str]:
    print('💲 Creating promotions and booking fee...')
    today = datetime.now(timezone.utc).date()
    promotions = [
        PromotionModel(
            id=_new_id(),
            code='WELCOME10',
            description='10% off plus $5',
            start_date=today,
            end_date=today + timedelta(days=90),
            discount_percent=Decimal('10'),
            discount_amount=Decimal('5.00'),
        ),
        PromotionModel(
            id=_new_id(),
            code='SUMMER',
            description='Last summer special',
            start_date=today - timedelta(days=120),
            end_date=today - timedelta(days=30),
            discount_percent=Decimal('25'),
        ),
    ]
    session.add_all(promotions)
    session.add(BookingFeeModel(amount=DEMO_BOOKING_FEE))
    await session.flush()

    print(f'   ✅ Promotions: {", ".join(p.code for p in promotions)}')
    print(f'   ✅ Booking fee: {DEMO_BOOKING_FEE}')
    return [promotion.code for promotion in promotions]


async def seed_demo_data() -> Optional[SeedSummary]:
    """Seed everything in a single transaction. Returns None when already seeded."""
    await create_db_and_tables()

    async with get_session_maker()() as session:
        if await _already_seeded(session):
            print('ℹ️  Demo data already present, skipping')
            return None

        try:
            show_ids = await create_showings(session)
            user_ids, card_ids = await create_users(session)
            promotion_codes = await create_pricing(session)
            await session.commit()
        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back: {e}')
            raise

    print('✅ All data committed successfully!')
    return SeedSummary(
        show_ids=show_ids,
        user_ids=user_ids,
        card_ids=card_ids,
        promotion_codes=promotion_codes,
    )


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await seed_demo_data()
        print('=' * 50)
        print('🌱 Data seeding completed!')
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
