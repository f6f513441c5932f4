"""
Unit of Work Pattern - one database session and transaction per use case

Architecture:
- UoW owns the session lifecycle for the duration of a use case
- UoW owns commit/rollback
- Repositories share the UoW session
- Leaving the context always rolls back whatever was not committed
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from cinema_booking.service.booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from cinema_booking.service.booking.app.interface.i_booking_fee_query_repo import (
        IBookingFeeQueryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_booking_query_repo import (
        IBookingQueryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_payment_card_query_repo import (
        IPaymentCardQueryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_promotion_query_repo import (
        IPromotionQueryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_seat_inventory_repo import (
        ISeatInventoryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_showing_query_repo import (
        IShowingQueryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_user_query_repo import IUserQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Booking Service

    Usage:
        async with uow:
            seats = await uow.seat_inventory_repo.lock_seats(...)
            await uow.booking_command_repo.create(...)
            await uow.commit()
    """

    # Seat inventory
    seat_inventory_repo: ISeatInventoryRepo
    showing_query_repo: IShowingQueryRepo

    # Reservation collaborators
    user_query_repo: IUserQueryRepo
    promotion_query_repo: IPromotionQueryRepo
    booking_fee_query_repo: IBookingFeeQueryRepo
    payment_card_query_repo: IPaymentCardQueryRepo

    # Booking repositories
    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy implementation; every repository gets the same AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from cinema_booking.service.booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.booking_fee_query_repo_impl import (
            BookingFeeQueryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.payment_card_query_repo_impl import (
            PaymentCardQueryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.promotion_query_repo_impl import (
            PromotionQueryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.seat_inventory_repo_impl import (
            SeatInventoryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.showing_query_repo_impl import (
            ShowingQueryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.user_query_repo_impl import (
            UserQueryRepoImpl,
        )

        # Create repositories with shared session
        self.seat_inventory_repo = SeatInventoryRepoImpl(session=self.session)
        self.showing_query_repo = ShowingQueryRepoImpl(session=self.session)
        self.user_query_repo = UserQueryRepoImpl(session=self.session)
        self.promotion_query_repo = PromotionQueryRepoImpl(session=self.session)
        self.booking_fee_query_repo = BookingFeeQueryRepoImpl(session=self.session)
        self.payment_card_query_repo = PaymentCardQueryRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        await super().__aexit__(*args)
        # Note: session close is handled by get_async_session context manager

    async def _commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """
    FastAPI dependency for Unit of Work

    Usage:
        async def reserve(uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
            async with uow:
                ...
                await uow.commit()
    """
    return SqlAlchemyUnitOfWork(session)
