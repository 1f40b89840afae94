from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.exception.exceptions import DomainError, NotFoundError
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity


class UpdateProfileUseCase:
    def __init__(self, *, user_command_repo: IUserCommandRepo) -> None:
        self.user_command_repo = user_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo)

    @Logger.io
    async def update(
        self, *, user_id: int, name: Optional[str] = None, phone: Optional[str] = None
    ) -> UserEntity:
        if name is None and phone is None:
            raise DomainError('At least one field (name or phone) is required')
        if name is not None and not name.strip():
            raise DomainError('Name cannot be empty')

        user = await self.user_command_repo.update_profile(user_id=user_id, name=name, phone=phone)
        if user is None:
            raise NotFoundError('User not found')
        return user
