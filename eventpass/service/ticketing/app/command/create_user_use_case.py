from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.exception.exceptions import ConflictError
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from eventpass.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from eventpass.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.domain.enum.user_role import UserRole


class CreateUserUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def create_user(
        self,
        *,
        email: str,
        password: str,
        name: str,
        phone: Optional[str] = None,
        role: UserRole = UserRole.USER,
    ) -> UserEntity:
        UserEntity.validate_role(role.value if isinstance(role, UserRole) else role)
        if await self.user_query_repo.exists_by_email(email):
            raise ConflictError('User with this email already exists')

        user_entity = UserEntity(email=email, name=name, phone=phone, role=UserRole(role))
        user_entity.set_password(password, self.password_hasher)

        # The unique index still guards a concurrent signup with the same email
        return await self.user_command_repo.create(user_entity)
