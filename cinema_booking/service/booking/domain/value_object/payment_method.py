"""
Payment selector accepted by the reservation flow.

A request pays either with a card already saved on the user's profile or with
card details typed in at checkout. New card details are only validated; they
are never stored by the reservation.
"""

from datetime import date
from uuid import UUID

import attrs


@attrs.frozen
class SavedCard:
    payment_card_id: UUID


@attrs.frozen
class NewCardDetails:
    card_number: str = attrs.field(repr=False)
    expiration_date: str
    cvv: str = attrs.field(repr=False)

    @property
    def last_four(self) -> str:
        return self.card_number[-4:]

    def is_expired_on(self, day: date) -> bool:
        """Cards are valid through the last day of their MM/YY month"""
        month, year = self.expiration_date.split('/')
        return (2000 + int(year), int(month)) < (day.year, day.month)


PaymentMethod = SavedCard | NewCardDetails
