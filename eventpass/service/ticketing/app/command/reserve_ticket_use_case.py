from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.command.ledger_deadline import ledger_deadline
from eventpass.service.ticketing.app.command.send_ticket_notification_use_case import (
    SendTicketNotificationUseCase,
)
from eventpass.service.ticketing.app.interface.i_reservation_ledger import IReservationLedger
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ReserveTicketUseCase:
    """
    Book one ticket for the caller.

    Flow:
    1. Ledger reserve under the ledger deadline (capacity + uniqueness enforced by the store)
    2. Hand the confirmation email to the background task group
    3. Return the ticket without waiting for the email
    """

    def __init__(
        self,
        *,
        reservation_ledger: IReservationLedger,
        send_ticket_notification: SendTicketNotificationUseCase,
        task_group: Optional[Any],
    ) -> None:
        self.reservation_ledger = reservation_ledger
        self.send_ticket_notification = send_ticket_notification
        self.task_group = task_group

    @classmethod
    @inject
    def depends(
        cls,
        reservation_ledger: IReservationLedger = Depends(Provide[Container.reservation_ledger]),
        send_ticket_notification: SendTicketNotificationUseCase = Depends(
            SendTicketNotificationUseCase.depends
        ),
        task_group: Any = Depends(Provide[Container.task_group]),
    ) -> Self:
        return cls(
            reservation_ledger=reservation_ledger,
            send_ticket_notification=send_ticket_notification,
            task_group=task_group,
        )

    @Logger.io
    async def execute(self, *, event_id: int, user_id: int) -> TicketEntity:
        async with ledger_deadline('reserve'):
            ticket = await self.reservation_ledger.reserve(event_id=event_id, user_id=user_id)

        self._dispatch_notification(ticket_id=ticket.id)
        return ticket

    def _dispatch_notification(self, *, ticket_id: str) -> None:
        if self.task_group is None:
            Logger.base.warning(f'⚠️ [BOOKING] No background task group, email for {ticket_id} not sent')
            return
        self.task_group.start_soon(self.send_ticket_notification.execute, ticket_id)
        Logger.base.info(f'📤 [BOOKING] Ticket email for {ticket_id} handed to background')
