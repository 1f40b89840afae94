"""
Unit tests for ticket documents and the SMTP notifier

Rendering is exercised for real (qrcode / reportlab); SMTP delivery is patched.
"""

import base64
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

from pydantic import SecretStr
import pytest

from eventpass.platform.config.core_setting import settings
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity, TicketEntity
from eventpass.service.ticketing.driven_adapter.document.ticket_document_renderer_impl import (
    TicketDocumentRendererImpl,
)
from eventpass.service.ticketing.driven_adapter.notification.smtp_ticket_notifier_impl import (
    SmtpTicketNotifierImpl,
)


PNG_MAGIC = b'\x89PNG\r\n\x1a\n'
SMTP_SEND = (
    'eventpass.service.ticketing.driven_adapter.notification.smtp_ticket_notifier_impl.aiosmtplib.send'
)


@pytest.fixture
def ticket_detail() -> TicketDetailEntity:
    return TicketDetailEntity(
        ticket=TicketEntity(id='0193a0c2-7d3e-7b52-9e41-5c1f2a3b4c5d', event_id=4, user_id=7),
        event_title='Summer <Music> Festival',
        event_date_time=datetime(2026, 7, 18, 18, 0, tzinfo=timezone.utc),
        event_location='Central Park, New York',
        event_category='Festival',
        event_owner_id=2,
        user_name='Alice Johnson',
        user_email='alice@example.com',
    )


@pytest.fixture
def renderer() -> TicketDocumentRendererImpl:
    return TicketDocumentRendererImpl()


@pytest.fixture
def smtp_credentials():
    with (
        patch.object(settings, 'SMTP_USER', 'tickets@example.com'),
        patch.object(settings, 'SMTP_PASSWORD', SecretStr('app-password')),
    ):
        yield


@pytest.mark.unit
class TestTicketDocumentRenderer:
    def test_qr_png(self, renderer: TicketDocumentRendererImpl) -> None:
        assert renderer.render_qr_png(payload='{"ticketId": "t-1"}').startswith(PNG_MAGIC)

    def test_qr_data_url(self, renderer: TicketDocumentRendererImpl) -> None:
        data_url = renderer.render_qr_data_url(payload='{"ticketId": "t-1"}')

        prefix = 'data:image/png;base64,'
        assert data_url.startswith(prefix)
        assert base64.b64decode(data_url[len(prefix):]).startswith(PNG_MAGIC)

    def test_pdf(
        self, renderer: TicketDocumentRendererImpl, ticket_detail: TicketDetailEntity
    ) -> None:
        pdf = renderer.render_pdf(detail=ticket_detail)

        assert pdf.startswith(b'%PDF')
        assert pdf.rstrip().endswith(b'%%EOF')


@pytest.mark.unit
class TestSmtpTicketNotifier:
    @pytest.mark.asyncio
    async def test_no_credentials__skipped(
        self, renderer: TicketDocumentRendererImpl, ticket_detail: TicketDetailEntity
    ) -> None:
        notifier = SmtpTicketNotifierImpl(document_renderer=renderer)

        with patch(SMTP_SEND, new_callable=AsyncMock) as mock_send:
            assert await notifier.send_ticket(detail=ticket_detail) is False

        mock_send.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.usefixtures('smtp_credentials')
    async def test_configured__sends_message(
        self, renderer: TicketDocumentRendererImpl, ticket_detail: TicketDetailEntity
    ) -> None:
        notifier = SmtpTicketNotifierImpl(document_renderer=renderer)

        with patch(SMTP_SEND, new_callable=AsyncMock) as mock_send:
            assert await notifier.send_ticket(detail=ticket_detail) is True

        mock_send.assert_awaited_once()
        message = mock_send.await_args.args[0]
        assert message['To'] == 'alice@example.com'
        assert mock_send.await_args.kwargs['hostname'] == settings.SMTP_HOST
        assert mock_send.await_args.kwargs['password'] == 'app-password'

    @pytest.mark.usefixtures('smtp_credentials')
    def test_build_message__bodies_qr_and_pdf(
        self, renderer: TicketDocumentRendererImpl, ticket_detail: TicketDetailEntity
    ) -> None:
        message = SmtpTicketNotifierImpl(document_renderer=renderer).build_message(
            detail=ticket_detail
        )

        assert message['Subject'] == 'Your Ticket for Summer <Music> Festival'
        assert 'tickets@example.com' in message['From']

        text_part = message.get_body(preferencelist=('plain',))
        html_part = message.get_body(preferencelist=('html',))
        assert ticket_detail.ticket.id in text_part.get_content()
        assert 'Summer &lt;Music&gt; Festival' in html_part.get_content()

        images = [part for part in message.walk() if part.get_content_type() == 'image/png']
        assert len(images) == 1
        assert images[0].get_content().startswith(PNG_MAGIC)

        attachments = list(message.iter_attachments())
        assert [a.get_filename() for a in attachments] == [
            f'ticket-{ticket_detail.ticket.id}.pdf'
        ]
        assert attachments[0].get_content().startswith(b'%PDF')
