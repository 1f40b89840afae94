from typing import List

from fastapi import APIRouter, Depends, Response, status

from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.command.cancel_ticket_use_case import CancelTicketUseCase
from eventpass.service.ticketing.app.command.check_in_ticket_use_case import CheckInTicketUseCase
from eventpass.service.ticketing.app.command.reserve_ticket_use_case import ReserveTicketUseCase
from eventpass.service.ticketing.app.query.list_tickets_use_case import ListTicketsUseCase
from eventpass.service.ticketing.app.query.ticket_document_use_case import TicketDocumentUseCase
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity, TicketEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from eventpass.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    BookTicketRequest,
    TicketAttendee,
    TicketDetailResponse,
    TicketEventSummary,
    TicketQrCodeResponse,
    TicketResponse,
)


router = APIRouter()


def to_ticket_response(ticket: TicketEntity) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        event_id=ticket.event_id,
        user_id=ticket.user_id,
        check_in=ticket.check_in,
        check_in_at=ticket.check_in_at,
        created_at=ticket.created_at,
    )


def to_ticket_detail_response(detail: TicketDetailEntity) -> TicketDetailResponse:
    return TicketDetailResponse(
        **to_ticket_response(detail.ticket).model_dump(),
        event=TicketEventSummary(
            id=detail.ticket.event_id,
            title=detail.event_title,
            date_time=detail.event_date_time,
            location=detail.event_location,
            image=detail.event_image,
            category=detail.event_category,
        ),
        user=TicketAttendee(id=detail.ticket.user_id, name=detail.user_name, email=detail.user_email),
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def book_ticket(
    request: BookTicketRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReserveTicketUseCase = Depends(ReserveTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(event_id=request.event_id, user_id=current_user.id)  # type: ignore[arg-type]
    return to_ticket_response(ticket)


@router.get('/user')
@Logger.io
async def list_my_tickets(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketDetailResponse]:
    details = await use_case.list_by_user(user_id=current_user.id)  # type: ignore[arg-type]
    return [to_ticket_detail_response(detail) for detail in details]


@router.get('/{ticket_id}/qrcode')
@Logger.io(truncate_content=True)
async def get_ticket_qr_code(
    ticket_id: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TicketDocumentUseCase = Depends(TicketDocumentUseCase.depends),
) -> TicketQrCodeResponse:
    detail, qr_code = await use_case.qr_code(ticket_id=ticket_id, user_id=current_user.id)  # type: ignore[arg-type]
    return TicketQrCodeResponse(
        qr_code=qr_code,
        ticket_id=detail.ticket.id,
        event_title=detail.event_title,
        date_time=detail.event_date_time,
        location=detail.event_location,
    )


@router.get('/{ticket_id}/pdf')
@Logger.io(truncate_content=True)
async def download_ticket_pdf(
    ticket_id: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TicketDocumentUseCase = Depends(TicketDocumentUseCase.depends),
) -> Response:
    pdf = await use_case.pdf(ticket_id=ticket_id, user_id=current_user.id)  # type: ignore[arg-type]
    return Response(
        content=pdf,
        media_type='application/pdf',
        headers={'Content-Disposition': f'attachment; filename="ticket-{ticket_id}.pdf"'},
    )


@router.delete('/{ticket_id}')
@Logger.io
async def cancel_ticket(
    ticket_id: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CancelTicketUseCase = Depends(CancelTicketUseCase.depends),
) -> TicketResponse:
    return to_ticket_response(await use_case.execute(ticket_id=ticket_id, actor=current_user))


@router.post('/{ticket_id}/check-in')
@Logger.io
async def check_in_ticket(
    ticket_id: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CheckInTicketUseCase = Depends(CheckInTicketUseCase.depends),
) -> TicketResponse:
    return to_ticket_response(await use_case.execute(ticket_id=ticket_id, actor=current_user))
