from uuid import UUID

import attrs


@attrs.define
class User:
    id: UUID
    email: str
    promo_opt_in: bool = False
