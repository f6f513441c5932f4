from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_user_query_repo import IUserQueryRepo
from cinema_booking.service.booking.domain.entity.user_entity import User
from cinema_booking.service.booking.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_by_id(self, *, user_id: UUID) -> Optional[User]:
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        db_user = result.scalar_one_or_none()
        if not db_user:
            return None
        return User(id=db_user.id, email=db_user.email, promo_opt_in=db_user.promo_opt_in)
