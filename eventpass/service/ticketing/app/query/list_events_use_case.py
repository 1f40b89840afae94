from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from eventpass.service.ticketing.domain.entity.event_entity import EventEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity


class ListEventsUseCase:
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
    async def list_published(self) -> List[EventEntity]:
        return await self.event_query_repo.list_published()

    @Logger.io
    async def list_for_user(self, *, actor: UserEntity) -> List[EventEntity]:
        """Admins see every event, everyone else the events they host."""
        if actor.is_admin:
            return await self.event_query_repo.list_all()
        return await self.event_query_repo.list_by_owner(user_id=actor.id)  # type: ignore[arg-type]

    @Logger.io
    async def list_all(self) -> List[EventEntity]:
        return await self.event_query_repo.list_all()
