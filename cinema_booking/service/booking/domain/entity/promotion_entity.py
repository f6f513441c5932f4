from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs


@attrs.define
class Promotion:
    id: UUID
    code: str
    start_date: date
    end_date: date
    discount_percent: Optional[Decimal] = None
    discount_amount: Optional[Decimal] = None
    description: str = ''

    def is_active_on(self, day: date) -> bool:
        # Both ends of the window are inclusive
        return self.start_date <= day <= self.end_date
