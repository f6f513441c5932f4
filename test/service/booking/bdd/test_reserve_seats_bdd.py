"""
BDD Step Definitions for seat reservation

Steps drive the HTTP API through TestClient and check the database through a
synchronous engine on the same sqlite file. pytest-bdd steps are synchronous.
"""

from decimal import Decimal
from typing import Any

from fastapi.testclient import TestClient
import pytest
from pytest_bdd import given, parsers, scenarios, then, when
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from cinema_booking.platform.constant.route_constant import BOOKING_RESERVE, BOOKING_SHOWING_SEATS
from test.shared.booking_world import (
    VALID_NEW_CARD,
    BookingWorld,
    count_rows,
    mark_seats_taken,
    seat_availability,
    seed_booking_world,
)


scenarios('reserve_seats.feature')

pytestmark = pytest.mark.integration


@pytest.fixture
def context() -> dict[str, Any]:
    return {}


def _labels(raw: str) -> list[str]:
    return [label.strip() for label in raw.split(',') if label.strip()]


def _world(context: dict[str, Any]) -> BookingWorld:
    return context['world']


def _post_reservation(
    client: TestClient,
    context: dict[str, Any],
    *,
    labels: str,
    category: str,
    price: str,
    payment: dict[str, str] | None = None,
    promotion_code: str | None = None,
) -> None:
    world = _world(context)
    body: dict[str, Any] = {
        'user_id': str(context['user_id']),
        'show_id': str(world.show_id),
        'tickets': [
            {'seat_id': str(world.seat_ids[label]), 'ticket_category': category, 'price': price}
            for label in _labels(labels)
        ],
        'payment': payment or {'payment_card_id': str(context['card_id'])},
    }
    if promotion_code:
        body['promotion_code'] = promotion_code
    context['response'] = client.post(BOOKING_RESERVE, json=body)


# ============ Given ============


@given(
    parsers.parse(
        'a showing in a {rows:d} by {seats_per_row:d} showroom with a booking fee of {fee}'
    )
)
def given_showing(
    rows: int,
    seats_per_row: int,
    fee: str,
    client: TestClient,
    sync_engine: Engine,
    context: dict[str, Any],
) -> None:
    # client is started first so its lifespan has created the tables
    with Session(sync_engine) as db_session:
        context['world'] = seed_booking_world(
            db_session, booking_fee=Decimal(fee), rows=rows, seats_per_row=seats_per_row
        )
        db_session.commit()


@given('I am a user who has opted in to promotions')
def given_opted_in_user(context: dict[str, Any]) -> None:
    world = _world(context)
    context['user_id'] = world.opted_in_user_id
    context['card_id'] = world.opted_in_card_id


@given('I am a user who has not opted in to promotions')
def given_opted_out_user(context: dict[str, Any]) -> None:
    world = _world(context)
    context['user_id'] = world.opted_out_user_id
    context['card_id'] = world.opted_out_card_id


@given(parsers.parse('seat "{label}" is already taken'))
def given_seat_taken(label: str, sync_engine: Engine, context: dict[str, Any]) -> None:
    with Session(sync_engine) as db_session:
        mark_seats_taken(db_session, [_world(context).seat_ids[label]])
        db_session.commit()


# ============ When ============


@when(parsers.parse('I reserve seats "{labels}" as "{category}" at {price} each'))
def when_reserve(
    labels: str, category: str, price: str, client: TestClient, context: dict[str, Any]
) -> None:
    _post_reservation(client, context, labels=labels, category=category, price=price)


@when(
    parsers.parse(
        'I reserve seats "{labels}" as "{category}" at {price} each with promotion code "{code}"'
    )
)
def when_reserve_with_promotion(
    labels: str, category: str, price: str, code: str, client: TestClient, context: dict[str, Any]
) -> None:
    _post_reservation(
        client, context, labels=labels, category=category, price=price, promotion_code=code
    )


@when(parsers.parse('I reserve seats "{labels}" as "{category}" at {price} each paying with a new card'))
def when_reserve_with_new_card(
    labels: str, category: str, price: str, client: TestClient, context: dict[str, Any]
) -> None:
    _post_reservation(
        client, context, labels=labels, category=category, price=price, payment=VALID_NEW_CARD
    )


@when(
    parsers.parse(
        'I reserve seats "{labels}" as "{category}" at {price} each paying with another user\'s card'
    )
)
def when_reserve_with_foreign_card(
    labels: str, category: str, price: str, client: TestClient, context: dict[str, Any]
) -> None:
    world = _world(context)
    other_card = (
        world.opted_out_card_id
        if context['card_id'] == world.opted_in_card_id
        else world.opted_in_card_id
    )
    _post_reservation(
        client,
        context,
        labels=labels,
        category=category,
        price=price,
        payment={'payment_card_id': str(other_card)},
    )


@when('I request the seat map of the showing that has no seats yet')
def when_request_unseeded_seat_map(client: TestClient, context: dict[str, Any]) -> None:
    show_id = _world(context).unseeded_show_id
    context['response'] = client.get(BOOKING_SHOWING_SEATS.format(show_id=show_id))


# ============ Then ============


@then(parsers.parse('the response status code should be {status_code:d}'))
def then_response_status_code(status_code: int, context: dict[str, Any]) -> None:
    response = context['response']
    assert response.status_code == status_code, (
        f'Expected {status_code}, got {response.status_code}: {response.text}'
    )


@then('the price breakdown should be:')
def then_price_breakdown(datatable: list[list[str]], context: dict[str, Any]) -> None:
    headers, values = datatable[0], datatable[1]
    data = context['response'].json()
    for field, expected in zip(headers, values, strict=True):
        assert data[field] == float(expected), f'{field}: {data[field]} != {expected}'


@then(parsers.parse('the response field "{field}" should be {value}'))
def then_response_field(field: str, value: str, context: dict[str, Any]) -> None:
    assert context['response'].json()[field] == float(value)


@then(parsers.parse('the unavailable seats should be "{labels}"'))
def then_unavailable_seats(labels: str, context: dict[str, Any]) -> None:
    world = _world(context)
    expected = sorted(str(world.seat_ids[label]) for label in _labels(labels))
    assert sorted(context['response'].json()['unavailable']) == expected


@then(parsers.parse('seats "{labels}" should be {state}'))
def then_seats_state(labels: str, state: str, sync_engine: Engine, context: dict[str, Any]) -> None:
    seat_ids = [_world(context).seat_ids[label] for label in _labels(labels)]
    with Session(sync_engine) as db_session:
        availability = seat_availability(db_session, seat_ids)
    assert set(availability.values()) == {state == 'available'}


@then(parsers.parse('{bookings:d} booking with {tickets:d} tickets should be stored'))
def then_rows_stored(bookings: int, tickets: int, sync_engine: Engine) -> None:
    with Session(sync_engine) as db_session:
        assert count_rows(db_session) == {'booking': bookings, 'ticket': tickets}


@then(parsers.parse('the seat map should have {count:d} available seats from "{first}" to "{last}"'))
def then_seat_map(count: int, first: str, last: str, context: dict[str, Any]) -> None:
    seats = context['response'].json()['seats']
    assert len(seats) == count
    assert all(seat['is_available'] for seat in seats)
    assert seats[0]['label'] == first
    assert seats[-1]['label'] == last
