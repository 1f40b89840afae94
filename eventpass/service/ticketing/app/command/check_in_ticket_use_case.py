from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.command.ledger_deadline import ledger_deadline
from eventpass.service.ticketing.app.interface.i_reservation_ledger import IReservationLedger
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity


class CheckInTicketUseCase:
    """Redeem a ticket at the door. After this it can no longer be cancelled."""

    def __init__(self, *, reservation_ledger: IReservationLedger) -> None:
        self.reservation_ledger = reservation_ledger

    @classmethod
    @inject
    def depends(
        cls,
        reservation_ledger: IReservationLedger = Depends(Provide[Container.reservation_ledger]),
    ) -> Self:
        return cls(reservation_ledger=reservation_ledger)

    @Logger.io
    async def execute(self, *, ticket_id: str, actor: UserEntity) -> TicketEntity:
        async with ledger_deadline('check_in'):
            return await self.reservation_ledger.check_in(ticket_id=ticket_id, actor=actor)
