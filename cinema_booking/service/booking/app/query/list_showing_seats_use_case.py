from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from cinema_booking.platform.config.di import Container
from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.exception.exceptions import NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.platform.metrics.booking_metrics import BookingMetrics
from cinema_booking.service.booking.app.command.seed_showing_seats import seed_seats_if_empty
from cinema_booking.service.booking.app.dto.showing_seat_map import ShowingSeatMap


class ListShowingSeatsUseCase:
    """Seat map of a showing; the first request for a showing seeds its seats."""

    def __init__(self, *, uow: AbstractUnitOfWork, booking_metrics: BookingMetrics) -> None:
        self.uow = uow
        self.booking_metrics = booking_metrics

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        booking_metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(uow=uow, booking_metrics=booking_metrics)

    @Logger.io
    async def list_seats(self, *, show_id: UUID) -> ShowingSeatMap:
        async with self.uow:
            showing = await self.uow.showing_query_repo.get_by_id(show_id=show_id)
            if not showing:
                raise NotFoundError('Showing not found')

            try:
                if await seed_seats_if_empty(uow=self.uow, showing=showing):
                    await self.uow.commit()
                    self.booking_metrics.record_seat_template_seeded()
            except IntegrityError:
                # A concurrent request seeded this showing first; read its seats
                Logger.base.info(f'🪑 [SEAT-SEED] Showing {show_id} already seeded concurrently')
                await self.uow.rollback()

            seats = await self.uow.seat_inventory_repo.list_for_showing(show_id=show_id)
            return ShowingSeatMap(showing=showing, seats=seats)
