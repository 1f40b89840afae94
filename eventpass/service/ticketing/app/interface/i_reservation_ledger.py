"""
Reservation Ledger Interface

The only port allowed to insert or delete ticket rows. Implementations hold no
in-memory state: capacity and uniqueness are enforced by the store's transactions,
so any number of processes may share one database.
"""

from abc import ABC, abstractmethod

from eventpass.service.ticketing.domain.entity.ticket_entity import TicketEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity


class IReservationLedger(ABC):
    @abstractmethod
    async def reserve(self, *, event_id: int, user_id: int) -> TicketEntity:
        """
        Issue one ticket for (event_id, user_id).

        Raises, checked in this order:
            EventNotFoundError, EventNotPublishedError, AlreadyBookedError, SoldOutError
            TransientReservationError: the store failed or timed out
        """
        pass

    @abstractmethod
    async def cancel(self, *, ticket_id: str, actor: UserEntity) -> TicketEntity:
        """
        Delete a ticket that is not checked in and free its capacity unit.

        Raises:
            TicketNotFoundError, TicketForbiddenError, AlreadyCheckedInError
            TransientReservationError: the store failed or timed out
        """
        pass

    @abstractmethod
    async def check_in(self, *, ticket_id: str, actor: UserEntity) -> TicketEntity:
        """
        Mark a ticket as redeemed; the actor must own the ticket's event or be admin.

        Raises:
            TicketNotFoundError, TicketForbiddenError, AlreadyCheckedInError
            TransientReservationError: the store failed or timed out
        """
        pass
