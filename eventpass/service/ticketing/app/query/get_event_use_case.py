from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.exception.exceptions import ForbiddenError, NotFoundError
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from eventpass.service.ticketing.domain.access_policy import can_modify
from eventpass.service.ticketing.domain.entity.event_entity import EventEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity


class GetEventUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def get_for_owner(self, *, event_id: int, actor: UserEntity) -> EventEntity:
        """The editable view of an event; only its owner or an admin may open it."""
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            Logger.base.warning(f'⚠️ [GET_EVENT] Event {event_id} not found')
            raise NotFoundError('Event not found')
        if not can_modify(actor, event.user_id):
            raise ForbiddenError('You do not have permission to view this event')
        return event
