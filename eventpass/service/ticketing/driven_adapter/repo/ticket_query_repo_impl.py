from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity, TicketEntity
from eventpass.service.ticketing.driven_adapter.model.event_model import EventModel
from eventpass.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from eventpass.service.ticketing.driven_adapter.model.user_model import UserModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _detail_query():
        return (
            select(TicketModel, EventModel, UserModel)
            .join(EventModel, EventModel.id == TicketModel.event_id)
            .join(UserModel, UserModel.id == TicketModel.user_id)
        )

    @Logger.io
    async def get_detail(self, *, ticket_id: str) -> Optional[TicketDetailEntity]:
        async with self.session_factory() as session:
            row = (
                await session.execute(self._detail_query().where(TicketModel.id == ticket_id))
            ).one_or_none()

        return self._row_to_entity(*row) if row else None

    @Logger.io(truncate_content=True)
    async def list_by_user(self, *, user_id: int) -> List[TicketDetailEntity]:
        stmt = (
            self._detail_query()
            .where(TicketModel.user_id == user_id)
            .order_by(EventModel.date_time.asc())
        )
        async with self.session_factory() as session:
            rows = (await session.execute(stmt)).all()

        return [self._row_to_entity(*row) for row in rows]

    @Logger.io(truncate_content=True)
    async def list_by_event(self, *, event_id: int) -> List[TicketDetailEntity]:
        stmt = (
            self._detail_query()
            .where(TicketModel.event_id == event_id)
            .order_by(TicketModel.created_at.asc(), TicketModel.id.asc())
        )
        async with self.session_factory() as session:
            rows = (await session.execute(stmt)).all()

        return [self._row_to_entity(*row) for row in rows]

    @staticmethod
    def _row_to_entity(
        ticket_model: TicketModel, event_model: EventModel, user_model: UserModel
    ) -> TicketDetailEntity:
        return TicketDetailEntity(
            ticket=TicketEntity(
                id=ticket_model.id,
                event_id=ticket_model.event_id,
                user_id=ticket_model.user_id,
                check_in=ticket_model.check_in,
                check_in_at=ticket_model.check_in_at,
                created_at=ticket_model.created_at,
            ),
            event_title=event_model.title,
            event_date_time=event_model.date_time,
            event_location=event_model.location,
            event_category=event_model.category,
            event_owner_id=event_model.user_id,
            event_image=event_model.image,
            user_name=user_model.name,
            user_email=user_model.email,
        )
