from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_showing_query_repo import IShowingQueryRepo
from cinema_booking.service.booking.domain.entity.showing_entity import Showing, Showroom
from cinema_booking.service.booking.driven_adapter.model.showing_model import ShowingModel


class ShowingQueryRepoImpl(IShowingQueryRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_by_id(self, *, show_id: UUID) -> Optional[Showing]:
        result = await self.session.execute(select(ShowingModel).where(ShowingModel.id == show_id))
        db_showing = result.scalar_one_or_none()
        if not db_showing:
            return None

        db_showroom = db_showing.showroom
        return Showing(
            id=db_showing.id,
            movie_title=db_showing.movie_title,
            showroom_id=db_showing.showroom_id,
            starts_at=db_showing.starts_at,
            showroom=Showroom(
                id=db_showroom.id,
                name=db_showroom.name,
                row_count=db_showroom.row_count,
                seats_per_row=db_showroom.seats_per_row,
            ),
        )
