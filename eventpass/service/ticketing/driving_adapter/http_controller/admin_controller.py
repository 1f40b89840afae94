from typing import List

from fastapi import APIRouter, Depends

from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from eventpass.service.ticketing.app.query.list_users_use_case import ListUsersUseCase
from eventpass.service.ticketing.driving_adapter.http_controller.auth.role_auth import require_admin
from eventpass.service.ticketing.driving_adapter.http_controller.event_controller import (
    to_event_response,
)
from eventpass.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventResponse,
)
from eventpass.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    AdminUserResponse,
)


router = APIRouter(dependencies=[Depends(require_admin)])


@router.get('/users')
@Logger.io
async def list_users(
    use_case: ListUsersUseCase = Depends(ListUsersUseCase.depends),
) -> List[AdminUserResponse]:
    return [
        AdminUserResponse(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            phone=user.phone,
            created_at=user.created_at,
            event_count=user.event_count,
            ticket_count=user.ticket_count,
        )
        for user in await use_case.list_with_counts()
    ]


@router.get('/events')
@Logger.io
async def list_all_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return [to_event_response(event) for event in await use_case.list_all()]
