from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinema_booking.platform.database.orm_db_setting import Base


class ShowroomModel(Base):
    __tablename__ = 'showroom'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    row_count: Mapped[int] = mapped_column(Integer, nullable=False)
    seats_per_row: Mapped[int] = mapped_column(Integer, nullable=False)


class ShowingModel(Base):
    __tablename__ = 'showing'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    movie_title: Mapped[str] = mapped_column(String(255), nullable=False)
    showroom_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('showroom.id'), nullable=False, index=True
    )
    starts_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    showroom: Mapped[ShowroomModel] = relationship(ShowroomModel, lazy='joined')
