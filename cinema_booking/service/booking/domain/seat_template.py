from uuid import UUID

import uuid_utils

from cinema_booking.service.booking.domain.entity.seat_entity import Seat
from cinema_booking.service.booking.domain.entity.showing_entity import Showroom


def row_label(index: int) -> str:
    """Spreadsheet-style row label for a zero-based row index: A..Z, AA, AB, ..."""
    if index < 0:
        raise ValueError(f'Row index must be non-negative, got {index}')
    label = ''
    n = index + 1
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        label = chr(ord('A') + remainder) + label
    return label


def generate_seats(*, show_id: UUID, showroom: Showroom) -> list[Seat]:
    """Every row label x seat number pair of the showroom, all available."""
    return [
        Seat(
            id=UUID(str(uuid_utils.uuid7())),
            show_id=show_id,
            row_label=row_label(row_index),
            seat_number=seat_number,
            is_available=True,
        )
        for row_index in range(showroom.row_count)
        for seat_number in range(1, showroom.seats_per_row + 1)
    ]
