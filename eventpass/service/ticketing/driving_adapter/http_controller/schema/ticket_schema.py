from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BookTicketRequest(BaseModel):
    event_id: int = Field(gt=0)


class TicketResponse(BaseModel):
    id: str
    event_id: int
    user_id: int
    check_in: bool
    check_in_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class TicketEventSummary(BaseModel):
    id: int
    title: str
    date_time: datetime
    location: str
    image: Optional[str] = None
    category: str


class TicketAttendee(BaseModel):
    id: int
    name: str
    email: str


class TicketDetailResponse(TicketResponse):
    event: TicketEventSummary
    user: TicketAttendee


class TicketQrCodeResponse(BaseModel):
    qr_code: str
    ticket_id: str
    event_title: str
    date_time: datetime
    location: str
