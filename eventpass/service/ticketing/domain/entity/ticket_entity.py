from datetime import datetime
import json
from typing import Optional

import attrs


@attrs.define
class TicketEntity:
    """One user's reservation against one event's capacity.

    ``check_in_at`` is set at most once, by check-in; a checked-in ticket can no
    longer be cancelled.
    """

    id: str
    event_id: int
    user_id: int
    check_in: bool = False
    check_in_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


@attrs.define
class TicketDetailEntity:
    """Ticket joined with the event and attendee fields shown on QR codes, PDFs and emails."""

    ticket: TicketEntity
    event_title: str
    event_date_time: datetime
    event_location: str
    event_category: str
    event_owner_id: int
    event_image: Optional[str] = None
    user_name: str = ''
    user_email: str = ''

    def qr_payload(self) -> str:
        return json.dumps(
            {
                'ticketId': self.ticket.id,
                'eventId': self.ticket.event_id,
                'userId': self.ticket.user_id,
                'eventTitle': self.event_title,
            }
        )
