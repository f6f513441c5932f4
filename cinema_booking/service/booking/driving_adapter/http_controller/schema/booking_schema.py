from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from cinema_booking.service.booking.domain.entity.booking_entity import MAX_TICKET_PRICE
from cinema_booking.service.booking.domain.enum.ticket_category import TicketCategory
from cinema_booking.service.booking.domain.value_object.payment_method import (
    NewCardDetails,
    SavedCard,
)
from cinema_booking.service.booking.domain.value_object.ticket_line_item import TicketLineItem


# Money goes out as a JSON number with two decimal places
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used='json')]


class TicketRequest(BaseModel):
    seat_id: UUID
    ticket_category: TicketCategory
    price: Decimal = Field(ge=0, le=MAX_TICKET_PRICE, max_digits=10, decimal_places=2)

    @field_validator('ticket_category', mode='before')
    @classmethod
    def normalize_category(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    def to_line_item(self) -> TicketLineItem:
        return TicketLineItem(
            seat_id=self.seat_id, ticket_category=self.ticket_category, price=self.price
        )


class SavedCardPayment(BaseModel):
    model_config = ConfigDict(extra='forbid')

    payment_card_id: UUID

    def to_payment_method(self) -> SavedCard:
        return SavedCard(payment_card_id=self.payment_card_id)


class NewCardPayment(BaseModel):
    model_config = ConfigDict(extra='forbid')

    card_number: str = Field(pattern=r'^\d{13,19}$')
    expiration_date: str = Field(pattern=r'^(0[1-9]|1[0-2])/\d{2}$')  # MM/YY
    cvv: str = Field(pattern=r'^\d{3,4}$')

    @field_validator('card_number', mode='before')
    @classmethod
    def strip_separators(cls, v: object) -> object:
        return v.replace(' ', '').replace('-', '') if isinstance(v, str) else v

    def to_payment_method(self) -> NewCardDetails:
        return NewCardDetails(
            card_number=self.card_number, expiration_date=self.expiration_date, cvv=self.cvv
        )


class ReserveSeatsRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'user_id': '0192f3a4-6b1c-7d2e-8f90-1a2b3c4d5e6f',
                    'show_id': '0192f3a4-6b1c-7d2e-8f90-abcdefabcdef',
                    'tickets': [
                        {
                            'seat_id': '0192f3a4-6b1c-7d2e-8f90-000000000001',
                            'ticket_category': 'adult',
                            'price': 12.00,
                        },
                    ],
                    'promotion_code': 'SPRING10',
                    'payment': {'payment_card_id': '0192f3a4-6b1c-7d2e-8f90-0000000000aa'},
                },
                {
                    'user_id': '0192f3a4-6b1c-7d2e-8f90-1a2b3c4d5e6f',
                    'show_id': '0192f3a4-6b1c-7d2e-8f90-abcdefabcdef',
                    'tickets': [
                        {
                            'seat_id': '0192f3a4-6b1c-7d2e-8f90-000000000002',
                            'ticket_category': 'child',
                            'price': 8.50,
                        },
                    ],
                    'payment': {
                        'card_number': '4111111111111111',
                        'expiration_date': '12/30',
                        'cvv': '123',
                    },
                },
            ]
        }
    }

    user_id: UUID
    show_id: UUID
    tickets: List[TicketRequest]
    # Matched verbatim; only null or an absent field means no promotion
    promotion_code: Optional[str] = Field(default=None, max_length=24)
    payment: Union[SavedCardPayment, NewCardPayment]


class ReserveSeatsResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'booking_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'booking_number': 1042,
                'subtotal': 100.00,
                'tax_amount': 5.95,
                'booking_fee': 2.00,
                'discount_amount': 15.00,
                'total_amount': 92.95,
            }
        },
    }

    booking_id: UUID
    booking_number: Optional[int]
    subtotal: Money
    tax_amount: Money
    booking_fee: Money
    discount_amount: Money
    total_amount: Money


class SeatResponse(BaseModel):
    seat_id: UUID
    row_label: str
    seat_number: int
    label: str
    is_available: bool


class ShowingSeatsResponse(BaseModel):
    show_id: UUID
    movie_title: str
    starts_at: datetime
    showroom_name: Optional[str] = None
    seats: List[SeatResponse]


class TicketResponse(BaseModel):
    ticket_id: UUID
    seat_id: UUID
    seat_label: str
    ticket_category: str
    price: Money


class BookingDetailResponse(BaseModel):
    booking_id: UUID
    booking_number: Optional[int]
    user_id: UUID
    show_id: UUID
    status: str
    subtotal: Money
    discount_amount: Money
    tax_amount: Money
    booking_fee: Money
    total_amount: Money
    promotion_id: Optional[UUID] = None
    payment_card_id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    tickets: List[TicketResponse] = []
