from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from eventpass.service.ticketing.domain.entity.event_entity import EventEntity
from eventpass.service.ticketing.domain.enum.event_category import EventCategory
from eventpass.service.ticketing.domain.enum.event_status import EventStatus
from eventpass.service.ticketing.driven_adapter.model.event_model import EventModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            event_model = (
                await session.execute(select(EventModel).where(EventModel.id == event_id))
            ).scalar_one_or_none()

            return self.model_to_entity(event_model) if event_model else None

    @Logger.io(truncate_content=True)
    async def list_published(self) -> List[EventEntity]:
        return await self._list(
            select(EventModel)
            .where(EventModel.status == EventStatus.PUBLISHED.value)
            .order_by(EventModel.date_time.asc())
        )

    @Logger.io(truncate_content=True)
    async def list_by_owner(self, *, user_id: int) -> List[EventEntity]:
        return await self._list(
            select(EventModel)
            .where(EventModel.user_id == user_id)
            .order_by(EventModel.date_time.asc())
        )

    @Logger.io(truncate_content=True)
    async def list_all(self) -> List[EventEntity]:
        return await self._list(select(EventModel).order_by(EventModel.date_time.asc()))

    async def _list(self, stmt) -> List[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self.model_to_entity(event_model) for event_model in result.scalars().all()]

    @staticmethod
    def model_to_entity(event_model: EventModel) -> EventEntity:
        return EventEntity(
            id=event_model.id,
            title=event_model.title,
            description=event_model.description,
            date_time=event_model.date_time,
            location=event_model.location,
            image=event_model.image,
            category=EventCategory(event_model.category),
            status=EventStatus(event_model.status),
            quantity=event_model.quantity,
            tickets_issued=event_model.tickets_issued,
            user_id=event_model.user_id,
            created_at=event_model.created_at,
            updated_at=event_model.updated_at,
        )
