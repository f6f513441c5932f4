from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Booking core metrics collector

    Tracks reservation outcomes (by error type) and end-to-end latency of the
    reservation transaction.
    """

    def __init__(self) -> None:
        self.seat_reservation_requests = Counter(
            'seat_reservation_requests_total',
            'Total seat reservation requests',
            ['result'],  # result: confirmed / error class name
        )

        self.seat_reservation_duration = Histogram(
            'seat_reservation_duration_seconds',
            'Seat reservation transaction duration',
            ['result'],
            buckets=[0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        self.seats_reserved = Counter(
            'seats_reserved_total',
            'Seats flipped to unavailable by committed bookings',
        )

        self.seat_templates_seeded = Counter(
            'seat_templates_seeded_total',
            'Showings whose seats were generated from the showroom template',
        )

    def record_seat_reservation(self, *, result: str, duration: float, seat_count: int = 0) -> None:
        self.seat_reservation_requests.labels(result=result).inc()
        self.seat_reservation_duration.labels(result=result).observe(duration)
        if seat_count:
            self.seats_reserved.inc(seat_count)

    def record_seat_template_seeded(self) -> None:
        self.seat_templates_seeded.inc()


# Global metrics instance
metrics = BookingMetrics()
