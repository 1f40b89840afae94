"""Ticketing Domain Enums"""

from eventpass.service.ticketing.domain.enum.event_category import EventCategory
from eventpass.service.ticketing.domain.enum.event_status import EventStatus
from eventpass.service.ticketing.domain.enum.user_role import UserRole

__all__ = ['EventCategory', 'EventStatus', 'UserRole']
