from abc import ABC, abstractmethod
from typing import List, Optional

from eventpass.service.ticketing.domain.entity.user_entity import UserEntity, UserSummaryEntity


class IUserQueryRepo(ABC):
    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def list_with_counts(self) -> List[UserSummaryEntity]:
        """All users ordered by name, with hosted event and held ticket counts."""
        pass
