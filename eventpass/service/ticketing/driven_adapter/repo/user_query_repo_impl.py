from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity, UserSummaryEntity
from eventpass.service.ticketing.domain.enum.user_role import UserRole
from eventpass.service.ticketing.driven_adapter.model.event_model import EventModel
from eventpass.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from eventpass.service.ticketing.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return self.model_to_entity(user_model)

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user_id))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return self.model_to_entity(user_model)

    @Logger.io
    async def exists_by_email(self, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.scalar_one_or_none() is not None

    @Logger.io(truncate_content=True)
    async def list_with_counts(self) -> List[UserSummaryEntity]:
        event_counts = (
            select(EventModel.user_id, func.count(EventModel.id).label('event_count'))
            .group_by(EventModel.user_id)
            .subquery()
        )
        ticket_counts = (
            select(TicketModel.user_id, func.count(TicketModel.id).label('ticket_count'))
            .group_by(TicketModel.user_id)
            .subquery()
        )
        stmt = (
            select(
                UserModel,
                func.coalesce(event_counts.c.event_count, 0),
                func.coalesce(ticket_counts.c.ticket_count, 0),
            )
            .outerjoin(event_counts, event_counts.c.user_id == UserModel.id)
            .outerjoin(ticket_counts, ticket_counts.c.user_id == UserModel.id)
            .order_by(UserModel.name.asc(), UserModel.id.asc())
        )

        async with self.session_factory() as session:
            rows = (await session.execute(stmt)).all()

        return [
            UserSummaryEntity(
                id=user_model.id,
                email=user_model.email,
                name=user_model.name,
                role=UserRole(user_model.role),
                phone=user_model.phone,
                created_at=user_model.created_at,
                event_count=int(event_count),
                ticket_count=int(ticket_count),
            )
            for user_model, event_count, ticket_count in rows
        ]

    @staticmethod
    def model_to_entity(user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            name=user_model.name,
            hashed_password=user_model.hashed_password,
            phone=user_model.phone,
            role=UserRole(user_model.role),
            created_at=user_model.created_at,
        )
