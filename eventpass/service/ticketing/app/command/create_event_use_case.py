from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from eventpass.service.ticketing.domain.entity.event_entity import EventEntity
from eventpass.service.ticketing.domain.enum.event_category import EventCategory
from eventpass.service.ticketing.domain.enum.event_status import EventStatus


class CreateEventUseCase:
    def __init__(self, *, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        user_id: int,
        title: str,
        date_time: datetime,
        location: str,
        category: EventCategory,
        quantity: int,
        description: Optional[str] = None,
        image: Optional[str] = None,
        status: EventStatus = EventStatus.DRAFTED,
    ) -> EventEntity:
        event = EventEntity(
            title=title,
            date_time=date_time,
            location=location,
            category=category,
            quantity=quantity,
            user_id=user_id,
            description=description,
            image=image,
            status=status,
        )
        created = await self.event_command_repo.create(event=event)
        Logger.base.info(f'🎉 [EVENT] User {user_id} created event {created.id} ({created.status.value})')
        return created
