from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_ticket_notifier import ITicketNotifier
from eventpass.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo


class SendTicketNotificationUseCase:
    """
    Deliver a freshly booked ticket to its holder.

    Runs detached from the booking request in the app's background task group, so
    it never raises: every failure is logged here and the reservation stays booked.
    """

    def __init__(self, *, ticket_query_repo: ITicketQueryRepo, ticket_notifier: ITicketNotifier) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.ticket_notifier = ticket_notifier

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        ticket_notifier: ITicketNotifier = Depends(Provide[Container.ticket_notifier]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo, ticket_notifier=ticket_notifier)

    async def execute(self, ticket_id: str) -> bool:
        try:
            detail = await self.ticket_query_repo.get_detail(ticket_id=ticket_id)
            if detail is None:
                # Cancelled before the email went out
                Logger.base.warning(f'📭 [MAIL] Ticket {ticket_id} no longer exists, email skipped')
                return False
            return await self.ticket_notifier.send_ticket(detail=detail)
        except Exception as e:
            Logger.base.exception(f'❌ [MAIL] Failed to send ticket email for {ticket_id}: {e}')
            return False
