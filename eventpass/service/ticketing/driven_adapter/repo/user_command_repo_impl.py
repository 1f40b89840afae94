from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventpass.platform.exception.exceptions import ConflictError
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.driven_adapter.model.user_model import UserModel
from eventpass.service.ticketing.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                name=user_entity.name,
                phone=user_entity.phone,
                role=user_entity.role.value,
            )
            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError('User with this email already exists') from e

            return UserQueryRepoImpl.model_to_entity(user_model)

    @Logger.io
    async def update_profile(
        self, *, user_id: int, name: Optional[str], phone: Optional[str]
    ) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            user_model = (
                await session.execute(select(UserModel).where(UserModel.id == user_id))
            ).scalar_one_or_none()
            if user_model is None:
                return None

            if name is not None:
                user_model.name = name
            if phone is not None:
                user_model.phone = phone
            await session.commit()

            return UserQueryRepoImpl.model_to_entity(user_model)
