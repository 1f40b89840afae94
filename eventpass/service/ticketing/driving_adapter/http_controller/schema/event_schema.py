from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from eventpass.service.ticketing.domain.enum.event_category import EventCategory
from eventpass.service.ticketing.domain.enum.event_status import EventStatus


class EventCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    date_time: datetime
    location: str = Field(min_length=1, max_length=255)
    image: Optional[str] = None
    category: EventCategory
    status: EventStatus = EventStatus.DRAFTED
    quantity: int = Field(gt=0)

    class Config:
        json_schema_extra = {
            'example': {
                'title': 'Summer Music Festival',
                'description': 'Three stages, one weekend',
                'date_time': '2026-07-18T18:00:00Z',
                'location': 'Riverside Park',
                'category': 'Festival',
                'status': 'published',
                'quantity': 500,
            }
        }


class EventUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    date_time: Optional[datetime] = None
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    image: Optional[str] = None
    category: Optional[EventCategory] = None
    status: Optional[EventStatus] = None
    quantity: Optional[int] = Field(default=None, gt=0)


class EventResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    date_time: datetime
    location: str
    image: Optional[str]
    category: EventCategory
    status: EventStatus
    quantity: int
    tickets_issued: int
    remaining: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
