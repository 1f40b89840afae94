from typing import AsyncContextManager, Callable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventpass.platform.exception.exceptions import NotFoundError
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from eventpass.service.ticketing.domain.entity.event_entity import EventEntity
from eventpass.service.ticketing.driven_adapter.model.event_model import EventModel
from eventpass.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from eventpass.service.ticketing.driven_adapter.repo.event_query_repo_impl import (
    EventQueryRepoImpl,
)


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with self.session_factory() as session:
            event_model = EventModel(
                title=event.title,
                description=event.description,
                date_time=event.date_time,
                location=event.location,
                image=event.image,
                category=event.category.value,
                status=event.status.value,
                quantity=event.quantity,
                tickets_issued=0,
                user_id=event.user_id,
            )
            session.add(event_model)
            await session.commit()

            return EventQueryRepoImpl.model_to_entity(event_model)

    @Logger.io
    async def update(self, *, event: EventEntity) -> EventEntity:
        async with self.session_factory() as session:
            event_model = (
                await session.execute(select(EventModel).where(EventModel.id == event.id))
            ).scalar_one_or_none()
            if event_model is None:
                raise NotFoundError('Event not found')

            event_model.title = event.title
            event_model.description = event.description
            event_model.date_time = event.date_time
            event_model.location = event.location
            event_model.image = event.image
            event_model.category = event.category.value
            event_model.status = event.status.value
            event_model.quantity = event.quantity
            await session.commit()
            await session.refresh(event_model)

            return EventQueryRepoImpl.model_to_entity(event_model)

    @Logger.io
    async def delete(self, *, event_id: int) -> bool:
        async with self.session_factory() as session:
            async with session.begin():
                # Tickets go with their event; explicit so stores without FK cascade behave the same
                await session.execute(delete(TicketModel).where(TicketModel.event_id == event_id))
                result = await session.execute(delete(EventModel).where(EventModel.id == event_id))

        Logger.base.info(f'🗑️ [EVENT] Deleted event {event_id} and its tickets')
        return result.rowcount == 1
