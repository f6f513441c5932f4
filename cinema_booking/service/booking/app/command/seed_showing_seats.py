from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.booking_exceptions import SeatNotFoundError
from cinema_booking.service.booking.domain.entity.showing_entity import Showing
from cinema_booking.service.booking.domain.seat_template import generate_seats


@Logger.io
async def seed_seats_if_empty(*, uow: AbstractUnitOfWork, showing: Showing) -> bool:
    """
    Generate the seat rows of a showing from its showroom template.

    Runs inside the caller's transaction and does nothing when the showing
    already has seats. Returns True when seats were created.
    """
    if await uow.seat_inventory_repo.count_for_showing(show_id=showing.id):
        return False
    if showing.showroom is None:
        raise SeatNotFoundError(f'Showing {showing.id} has no showroom template')

    seats = generate_seats(show_id=showing.id, showroom=showing.showroom)
    await uow.seat_inventory_repo.create_many(seats=seats)
    Logger.base.info(
        f'🪑 [SEAT-SEED] Generated {len(seats)} seats for showing {showing.id} '
        f'({showing.showroom.row_count}x{showing.showroom.seats_per_row})'
    )
    return True
