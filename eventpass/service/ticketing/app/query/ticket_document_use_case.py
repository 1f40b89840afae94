from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_ticket_document_renderer import (
    ITicketDocumentRenderer,
)
from eventpass.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity
from eventpass.service.ticketing.domain.reservation_error import (
    TicketForbiddenError,
    TicketNotFoundError,
)


class TicketDocumentUseCase:
    """QR code and PDF renditions of a ticket, available to the ticket holder only."""

    def __init__(
        self, *, ticket_query_repo: ITicketQueryRepo, document_renderer: ITicketDocumentRenderer
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.document_renderer = document_renderer

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        document_renderer: ITicketDocumentRenderer = Depends(
            Provide[Container.ticket_document_renderer]
        ),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo, document_renderer=document_renderer)

    async def _get_own_ticket(self, *, ticket_id: str, user_id: int, action: str) -> TicketDetailEntity:
        detail = await self.ticket_query_repo.get_detail(ticket_id=ticket_id)
        if detail is None:
            raise TicketNotFoundError()
        if detail.ticket.user_id != user_id:
            raise TicketForbiddenError(f'You do not have permission to {action} this ticket')
        return detail

    @Logger.io
    async def qr_code(self, *, ticket_id: str, user_id: int) -> tuple[TicketDetailEntity, str]:
        detail = await self._get_own_ticket(ticket_id=ticket_id, user_id=user_id, action='view')
        return detail, self.document_renderer.render_qr_data_url(payload=detail.qr_payload())

    @Logger.io(truncate_content=True)
    async def pdf(self, *, ticket_id: str, user_id: int) -> bytes:
        detail = await self._get_own_ticket(ticket_id=ticket_id, user_id=user_id, action='download')
        return self.document_renderer.render_pdf(detail=detail)
