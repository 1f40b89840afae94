"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from eventpass.service.ticketing.driven_adapter.model.event_model import EventModel
from eventpass.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from eventpass.service.ticketing.driven_adapter.model.user_model import UserModel

__all__ = [
    'EventModel',
    'TicketModel',
    'UserModel',
]
