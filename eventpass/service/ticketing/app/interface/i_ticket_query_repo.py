from abc import ABC, abstractmethod
from typing import List, Optional

from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_detail(self, *, ticket_id: str) -> Optional[TicketDetailEntity]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[TicketDetailEntity]:
        """The user's tickets ordered by event date."""
        pass

    @abstractmethod
    async def list_by_event(self, *, event_id: int) -> List[TicketDetailEntity]:
        pass
