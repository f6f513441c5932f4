from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from cinema_booking.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from cinema_booking.service.booking.app.query.list_showing_seats_use_case import (
    ListShowingSeatsUseCase,
)
from cinema_booking.service.booking.app.query.list_user_bookings_use_case import (
    ListUserBookingsUseCase,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingDetailResponse,
    ReserveSeatsRequest,
    ReserveSeatsResponse,
    SeatResponse,
    ShowingSeatsResponse,
    TicketResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_booking_detail(booking: Booking) -> BookingDetailResponse:
    return BookingDetailResponse(
        booking_id=booking.id,
        booking_number=booking.booking_number,
        user_id=booking.user_id,
        show_id=booking.show_id,
        status=booking.status.value,
        subtotal=booking.subtotal,
        discount_amount=booking.discount_amount,
        tax_amount=booking.tax_amount,
        booking_fee=booking.booking_fee,
        total_amount=booking.total_amount,
        promotion_id=booking.promotion_id,
        payment_card_id=booking.payment_card_id,
        created_at=booking.created_at,
        tickets=[
            TicketResponse(
                ticket_id=ticket.id,
                seat_id=ticket.seat_id,
                seat_label=ticket.seat_label,
                ticket_category=ticket.ticket_category,
                price=ticket.price,
            )
            for ticket in booking.tickets
        ],
    )


@router.post('/reserve', status_code=status.HTTP_201_CREATED)
@Logger.io
async def reserve_seats(
    request: ReserveSeatsRequest,
    use_case: ReserveSeatsUseCase = Depends(ReserveSeatsUseCase.depends),
) -> ReserveSeatsResponse:
    with tracer.start_as_current_span('controller.reserve_seats') as span:
        span.set_attribute('show_id', str(request.show_id))
        span.set_attribute('user_id', str(request.user_id))
        span.set_attribute('ticket_count', len(request.tickets))

        result = await use_case.reserve(
            user_id=request.user_id,
            show_id=request.show_id,
            line_items=[ticket.to_line_item() for ticket in request.tickets],
            payment=request.payment.to_payment_method(),
            promotion_code=request.promotion_code,
        )

        return ReserveSeatsResponse(
            booking_id=result.booking_id,
            booking_number=result.booking_number,
            subtotal=result.subtotal,
            tax_amount=result.tax_amount,
            booking_fee=result.booking_fee,
            discount_amount=result.discount_amount,
            total_amount=result.total_amount,
        )


@router.get('/seats/{show_id}')
@Logger.io
async def list_showing_seats(
    show_id: UUID,
    use_case: ListShowingSeatsUseCase = Depends(ListShowingSeatsUseCase.depends),
) -> ShowingSeatsResponse:
    seat_map = await use_case.list_seats(show_id=show_id)
    showing = seat_map.showing
    return ShowingSeatsResponse(
        show_id=showing.id,
        movie_title=showing.movie_title,
        starts_at=showing.starts_at,
        showroom_name=showing.showroom.name if showing.showroom else None,
        seats=[
            SeatResponse(
                seat_id=seat.id,
                row_label=seat.row_label,
                seat_number=seat.seat_number,
                label=seat.label,
                is_available=seat.is_available,
            )
            for seat in seat_map.seats
        ],
    )


@router.get('/user/{user_id}')
@Logger.io
async def list_user_bookings(
    user_id: UUID,
    use_case: ListUserBookingsUseCase = Depends(ListUserBookingsUseCase.depends),
) -> List[BookingDetailResponse]:
    bookings = await use_case.list_bookings(user_id=user_id)
    return [_to_booking_detail(booking) for booking in bookings]


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: UUID,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingDetailResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    return _to_booking_detail(booking)
