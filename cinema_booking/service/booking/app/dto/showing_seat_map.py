from typing import List

import attrs

from cinema_booking.service.booking.domain.entity.seat_entity import Seat
from cinema_booking.service.booking.domain.entity.showing_entity import Showing


@attrs.frozen
class ShowingSeatMap:
    showing: Showing
    seats: List[Seat]
