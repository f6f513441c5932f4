import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.service.booking.driven_adapter.model import (
    BookingFeeModel,
    SeatModel,
    UserModel,
)
from script.seed_data import DEMO_USERS, seed_demo_data


@pytest.mark.integration
@pytest.mark.asyncio
async def test_seed_demo_data_once(session: AsyncSession):
    summary = await seed_demo_data()

    assert summary is not None
    assert len(summary.show_ids) == 2
    assert set(summary.user_ids) == {user.email for user in DEMO_USERS}
    assert summary.promotion_codes == ['WELCOME10', 'SUMMER']

    seeded_seats = await session.scalar(
        select(func.count()).select_from(SeatModel).where(SeatModel.show_id == summary.show_ids[0])
    )
    template_only = await session.scalar(
        select(func.count()).select_from(SeatModel).where(SeatModel.show_id == summary.show_ids[1])
    )
    assert seeded_seats == 96
    assert template_only == 0

    assert await seed_demo_data() is None
    assert await session.scalar(select(func.count()).select_from(UserModel)) == 2
    assert await session.scalar(select(func.count()).select_from(BookingFeeModel)) == 1
