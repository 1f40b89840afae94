from typing import List

from fastapi import APIRouter, Depends, Response, status

from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from eventpass.service.ticketing.app.command.delete_event_use_case import DeleteEventUseCase
from eventpass.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from eventpass.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from eventpass.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from eventpass.service.ticketing.app.query.list_tickets_use_case import ListTicketsUseCase
from eventpass.service.ticketing.domain.entity.event_entity import EventEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from eventpass.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventResponse,
    EventUpdateRequest,
)
from eventpass.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    TicketDetailResponse,
)
from eventpass.service.ticketing.driving_adapter.http_controller.ticket_controller import (
    to_ticket_detail_response,
)


router = APIRouter()


def to_event_response(event: EventEntity) -> EventResponse:
    if event.id is None:
        raise ValueError('Event ID should not be None after persistence.')

    return EventResponse(
        id=event.id,
        title=event.title,
        description=event.description,
        date_time=event.date_time,
        location=event.location,
        image=event.image,
        category=event.category,
        status=event.status,
        quantity=event.quantity,
        tickets_issued=event.tickets_issued,
        remaining=event.remaining,
        user_id=event.user_id,
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


@router.get('/published')
@Logger.io
async def list_published_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return [to_event_response(event) for event in await use_case.list_published()]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.create(
        user_id=current_user.id,  # type: ignore[arg-type]
        title=request.title,
        description=request.description,
        date_time=request.date_time,
        location=request.location,
        image=request.image,
        category=request.category,
        status=request.status,
        quantity=request.quantity,
    )
    return to_event_response(event)


@router.get('/user')
@Logger.io
async def list_my_events(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return [to_event_response(event) for event in await use_case.list_for_user(actor=current_user)]


@router.get('/{event_id}/tickets')
@Logger.io
async def list_event_tickets(
    event_id: int,
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketDetailResponse]:
    return [to_ticket_detail_response(detail) for detail in await use_case.list_by_event(event_id=event_id)]


@router.get('/{event_id}')
@Logger.io
async def get_event(
    event_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    return to_event_response(await use_case.get_for_owner(event_id=event_id, actor=current_user))


@router.put('/{event_id}')
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.update(
        event_id=event_id, actor=current_user, **request.model_dump(exclude_unset=True)
    )
    return to_event_response(event)


@router.delete('/{event_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_event(
    event_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> Response:
    await use_case.delete(event_id=event_id, actor=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
