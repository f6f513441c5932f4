from decimal import Decimal
from uuid import uuid4

from pydantic import ValidationError
import pytest

from cinema_booking.service.booking.domain.enum.ticket_category import TicketCategory
from cinema_booking.service.booking.domain.value_object.payment_method import (
    NewCardDetails,
    SavedCard,
)
from cinema_booking.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    NewCardPayment,
    ReserveSeatsRequest,
    ReserveSeatsResponse,
    SavedCardPayment,
    TicketRequest,
)


pytestmark = pytest.mark.unit


def _request_body(**overrides) -> dict:
    body = {
        'user_id': str(uuid4()),
        'show_id': str(uuid4()),
        'tickets': [{'seat_id': str(uuid4()), 'ticket_category': 'adult', 'price': 12.00}],
        'payment': {'payment_card_id': str(uuid4())},
    }
    body.update(overrides)
    return body


class TestReserveSeatsRequest:
    def test_saved_card_payment(self):
        request = ReserveSeatsRequest.model_validate(_request_body())

        assert isinstance(request.payment, SavedCardPayment)
        assert isinstance(request.payment.to_payment_method(), SavedCard)

    def test_new_card_payment(self):
        request = ReserveSeatsRequest.model_validate(
            _request_body(
                payment={
                    'card_number': '4111 1111-1111 1111',
                    'expiration_date': '09/29',
                    'cvv': '123',
                }
            )
        )

        assert isinstance(request.payment, NewCardPayment)
        method = request.payment.to_payment_method()
        assert isinstance(method, NewCardDetails)
        assert method.card_number == '4111111111111111'
        assert method.last_four == '1111'

    def test_payment_mixing_both_shapes_is_rejected(self):
        with pytest.raises(ValidationError):
            ReserveSeatsRequest.model_validate(
                _request_body(
                    payment={
                        'payment_card_id': str(uuid4()),
                        'card_number': '4111111111111111',
                        'expiration_date': '09/29',
                        'cvv': '123',
                    }
                )
            )

    @pytest.mark.parametrize(
        'payment',
        [
            {'card_number': '4111', 'expiration_date': '09/29', 'cvv': '123'},
            {'card_number': '4111111111111111', 'expiration_date': '13/29', 'cvv': '123'},
            {'card_number': '4111111111111111', 'expiration_date': '2029-09', 'cvv': '123'},
            {'card_number': '4111111111111111', 'expiration_date': '09/29', 'cvv': '12'},
            {},
        ],
    )
    def test_malformed_payment_is_rejected(self, payment: dict):
        with pytest.raises(ValidationError):
            ReserveSeatsRequest.model_validate(_request_body(payment=payment))

    def test_missing_or_null_promotion_code_means_none(self):
        body = _request_body()

        assert ReserveSeatsRequest.model_validate(body).promotion_code is None
        assert (
            ReserveSeatsRequest.model_validate({**body, 'promotion_code': None}).promotion_code
            is None
        )

    @pytest.mark.parametrize('code', ['', '   ', ' SPRING10 ', 'spring10'])
    def test_promotion_code_is_kept_verbatim(self, code: str):
        request = ReserveSeatsRequest.model_validate(_request_body(promotion_code=code))

        assert request.promotion_code == code

    def test_empty_ticket_list_is_left_to_the_domain(self):
        request = ReserveSeatsRequest.model_validate(_request_body(tickets=[]))

        assert request.tickets == []


class TestTicketRequest:
    def test_category_is_case_insensitive(self):
        ticket = TicketRequest.model_validate(
            {'seat_id': str(uuid4()), 'ticket_category': ' Senior ', 'price': '9.50'}
        )

        line_item = ticket.to_line_item()
        assert line_item.ticket_category is TicketCategory.SENIOR
        assert line_item.price == Decimal('9.50')

    @pytest.mark.parametrize('category', ['vip', 'adults', ''])
    def test_unknown_category_is_rejected(self, category: str):
        with pytest.raises(ValidationError):
            TicketRequest.model_validate(
                {'seat_id': str(uuid4()), 'ticket_category': category, 'price': '9.50'}
            )

    @pytest.mark.parametrize('price', ['-0.01', '9.999', '10000.01', '99999999.99'])
    def test_price_must_be_bounded_cents(self, price: str):
        with pytest.raises(ValidationError):
            TicketRequest.model_validate(
                {'seat_id': str(uuid4()), 'ticket_category': 'adult', 'price': price}
            )


def test_money_is_serialized_as_json_number():
    response = ReserveSeatsResponse(
        booking_id=uuid4(),
        booking_number=7,
        subtotal=Decimal('100.00'),
        tax_amount=Decimal('5.95'),
        booking_fee=Decimal('2.00'),
        discount_amount=Decimal('15.00'),
        total_amount=Decimal('92.95'),
    )

    body = response.model_dump(mode='json')

    assert body['total_amount'] == 92.95
    assert isinstance(body['subtotal'], float)
    assert response.model_dump()['total_amount'] == Decimal('92.95')
