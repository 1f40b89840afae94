"""
Event Status Enum - Domain Value Object

Only published events accept bookings.
"""

from enum import Enum


class EventStatus(str, Enum):
    DRAFTED = 'drafted'
    PUBLISHED = 'published'
