from enum import StrEnum


class BookingStatus(StrEnum):
    # Bookings are created confirmed; there is no pending/cancel lifecycle
    CONFIRMED = 'CONFIRMED'
