from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from eventpass.platform.database.orm_db_setting import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('event.id', ondelete='CASCADE'), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True
    )
    check_in: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    check_in_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now, server_default=func.now(), nullable=False
    )

    __table_args__ = (UniqueConstraint('event_id', 'user_id', name='uq_ticket_event_user'),)

    def __repr__(self):
        return f'<TicketModel(id={self.id}, event_id={self.event_id}, user_id={self.user_id})>'
