from uuid import UUID

import attrs


@attrs.define
class Seat:
    id: UUID
    show_id: UUID
    row_label: str
    seat_number: int
    is_available: bool = True

    @property
    def label(self) -> str:
        """Human-readable seat label, e.g. C7"""
        return f'{self.row_label}{self.seat_number}'
