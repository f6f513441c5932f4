from typing import List
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_seat_inventory_repo import ISeatInventoryRepo
from cinema_booking.service.booking.domain.entity.seat_entity import Seat
from cinema_booking.service.booking.driven_adapter.model.seat_model import SeatModel


class SeatInventoryRepoImpl(ISeatInventoryRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_seat: SeatModel) -> Seat:
        return Seat(
            id=db_seat.id,
            show_id=db_seat.show_id,
            row_label=db_seat.row_label,
            seat_number=db_seat.seat_number,
            is_available=db_seat.is_available,
        )

    @Logger.io
    async def count_for_showing(self, *, show_id: UUID) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(SeatModel).where(SeatModel.show_id == show_id)
        )
        return result.scalar_one()

    @Logger.io
    async def create_many(self, *, seats: List[Seat]) -> None:
        self.session.add_all(
            SeatModel(
                id=seat.id,
                show_id=seat.show_id,
                row_label=seat.row_label,
                seat_number=seat.seat_number,
                is_available=seat.is_available,
            )
            for seat in seats
        )
        await self.session.flush()

    @Logger.io
    async def list_for_showing(self, *, show_id: UUID) -> List[Seat]:
        result = await self.session.execute(
            select(SeatModel)
            .where(SeatModel.show_id == show_id)
            # AA sorts after Z
            .order_by(func.length(SeatModel.row_label), SeatModel.row_label, SeatModel.seat_number)
        )
        return [self._to_entity(db_seat) for db_seat in result.scalars().all()]

    @Logger.io
    async def lock_seats(self, *, show_id: UUID, seat_ids: List[UUID]) -> List[Seat]:
        # One locking read for the whole set, in id order, so overlapping
        # reservations queue on the same rows instead of deadlocking
        result = await self.session.execute(
            select(SeatModel)
            .where(SeatModel.show_id == show_id, SeatModel.id.in_(seat_ids))
            .order_by(SeatModel.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return [self._to_entity(db_seat) for db_seat in result.scalars().all()]

    @Logger.io
    async def mark_unavailable(self, *, show_id: UUID, seat_ids: List[UUID]) -> List[UUID]:
        result = await self.session.execute(
            update(SeatModel)
            .where(
                SeatModel.show_id == show_id,
                SeatModel.id.in_(seat_ids),
                SeatModel.is_available.is_(True),
            )
            .values(is_available=False)
            .returning(SeatModel.id)
            .execution_options(synchronize_session=False)
        )
        return list(result.scalars().all())
