from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.exception.exceptions import NotFoundError
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from eventpass.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity


class ListTicketsUseCase:
    def __init__(
        self, *, ticket_query_repo: ITicketQueryRepo, event_query_repo: IEventQueryRepo
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo, event_query_repo=event_query_repo)

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[TicketDetailEntity]:
        return await self.ticket_query_repo.list_by_user(user_id=user_id)

    @Logger.io
    async def list_by_event(self, *, event_id: int) -> List[TicketDetailEntity]:
        if await self.event_query_repo.get_by_id(event_id=event_id) is None:
            raise NotFoundError('Event not found')
        return await self.ticket_query_repo.list_by_event(event_id=event_id)
