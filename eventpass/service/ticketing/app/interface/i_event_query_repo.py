from abc import ABC, abstractmethod
from typing import List, Optional

from eventpass.service.ticketing.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_published(self) -> List[EventEntity]:
        pass

    @abstractmethod
    async def list_by_owner(self, *, user_id: int) -> List[EventEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[EventEntity]:
        pass
