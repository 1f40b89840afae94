"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from eventpass.service.ticketing.app.command import (
    cancel_ticket_use_case,
    check_in_ticket_use_case,
    create_event_use_case,
    create_user_use_case,
    delete_event_use_case,
    reserve_ticket_use_case,
    send_ticket_notification_use_case,
    update_event_use_case,
    update_profile_use_case,
)
from eventpass.service.ticketing.app.query import (
    get_event_use_case,
    list_events_use_case,
    list_tickets_use_case,
    list_users_use_case,
    ticket_document_use_case,
)
from eventpass.service.ticketing.driving_adapter.http_controller import user_controller
from eventpass.service.ticketing.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    create_user_use_case,
    update_profile_use_case,
    create_event_use_case,
    update_event_use_case,
    delete_event_use_case,
    reserve_ticket_use_case,
    send_ticket_notification_use_case,
    cancel_ticket_use_case,
    check_in_ticket_use_case,
    get_event_use_case,
    list_events_use_case,
    list_tickets_use_case,
    list_users_use_case,
    ticket_document_use_case,
    user_controller,
    role_auth,
]
