from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from eventpass.platform.database.orm_db_setting import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventModel(Base):
    __tablename__ = 'event'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='drafted', nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    # Issued-ticket counter; only the reservation ledger moves it
    tickets_issued: Mapped[int] = mapped_column(Integer, default=0, server_default='0', nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utc_now,
        onupdate=_utc_now,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint('quantity > 0', name='ck_event_quantity_positive'),
        CheckConstraint('tickets_issued >= 0', name='ck_event_tickets_issued_non_negative'),
    )

    def __repr__(self):
        return f'<EventModel(id={self.id}, title={self.title}, status={self.status})>'
