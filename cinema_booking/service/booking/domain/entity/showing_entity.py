from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs


@attrs.define
class Showroom:
    """Hall template: every showing in this room gets row_count x seats_per_row seats."""

    id: UUID
    name: str
    row_count: int
    seats_per_row: int


@attrs.define
class Showing:
    id: UUID
    movie_title: str
    showroom_id: UUID
    starts_at: datetime
    showroom: Optional[Showroom] = None
