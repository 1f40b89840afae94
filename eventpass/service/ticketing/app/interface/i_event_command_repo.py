from abc import ABC, abstractmethod

from eventpass.service.ticketing.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def update(self, *, event: EventEntity) -> EventEntity:
        """Write the editable fields back; ``tickets_issued`` is never touched here."""
        pass

    @abstractmethod
    async def delete(self, *, event_id: int) -> bool:
        """Delete the event and its tickets in one transaction."""
        pass
