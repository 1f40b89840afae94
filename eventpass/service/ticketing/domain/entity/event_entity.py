from datetime import datetime
from typing import Optional

import attrs

from eventpass.platform.exception.exceptions import DomainError
from eventpass.service.ticketing.domain.enum.event_category import EventCategory
from eventpass.service.ticketing.domain.enum.event_status import EventStatus


def _validate_positive_quantity(instance: 'EventEntity', attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise DomainError('Quantity must be greater than 0')


def _validate_not_blank(instance: 'EventEntity', attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'{attribute.name.capitalize()} is required')


@attrs.define
class EventEntity:
    title: str = attrs.field(validator=_validate_not_blank)
    date_time: datetime
    location: str = attrs.field(validator=_validate_not_blank)
    category: EventCategory
    quantity: int = attrs.field(validator=_validate_positive_quantity)
    user_id: int
    description: Optional[str] = None
    image: Optional[str] = None
    status: EventStatus = EventStatus.DRAFTED
    tickets_issued: int = 0
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_published(self) -> bool:
        return self.status == EventStatus.PUBLISHED

    @property
    def remaining(self) -> int:
        # Quantity may be edited below the issued count; never report negative availability
        return max(self.quantity - self.tickets_issued, 0)

    def apply_changes(self, **changes: object) -> None:
        """Partial update; attrs validators re-run on every assigned field."""
        for field_name, value in changes.items():
            if value is None:
                continue
            if not hasattr(self, field_name) or field_name in ('id', 'user_id', 'tickets_issued'):
                raise DomainError(f'Field {field_name} cannot be updated')
            setattr(self, field_name, value)
