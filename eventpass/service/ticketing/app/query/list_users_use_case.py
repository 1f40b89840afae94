from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from eventpass.service.ticketing.domain.entity.user_entity import UserSummaryEntity


class ListUsersUseCase:
    def __init__(self, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def list_with_counts(self) -> List[UserSummaryEntity]:
        return await self.user_query_repo.list_with_counts()
