from abc import ABC, abstractmethod
from typing import Optional

from eventpass.service.ticketing.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Persist a new user; raises ConflictError on a duplicate email."""
        pass

    @abstractmethod
    async def update_profile(
        self, *, user_id: int, name: Optional[str], phone: Optional[str]
    ) -> Optional[UserEntity]:
        pass
