from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from cinema_booking.platform.database.orm_db_setting import Base


class SeatModel(Base):
    __tablename__ = 'seat'
    __table_args__ = (
        UniqueConstraint('show_id', 'row_label', 'seat_number', name='uq_seat_show_row_number'),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    show_id: Mapped[UUID] = mapped_column(Uuid, ForeignKey('showing.id'), nullable=False, index=True)
    row_label: Mapped[str] = mapped_column(String(5), nullable=False)
    seat_number: Mapped[int] = mapped_column(Integer, nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f'<SeatModel(id={self.id}, seat={self.row_label}{self.seat_number})>'
