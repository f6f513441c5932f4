from uuid import UUID

import attrs


@attrs.define
class PaymentCard:
    id: UUID
    user_id: UUID
    card_type: str
    last_four: str
    expiration_date: str

    def belongs_to(self, user_id: UUID) -> bool:
        return self.user_id == user_id
