from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from functools import partial
from html import escape

import aiosmtplib
from anyio import to_thread

from eventpass.platform.config.core_setting import settings
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_ticket_document_renderer import (
    ITicketDocumentRenderer,
)
from eventpass.service.ticketing.app.interface.i_ticket_notifier import ITicketNotifier
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity


class SmtpTicketNotifierImpl(ITicketNotifier):
    """Sends the booking confirmation: HTML + text body, inline QR code, PDF ticket attached."""

    def __init__(self, document_renderer: ITicketDocumentRenderer) -> None:
        self.document_renderer = document_renderer

    @property
    def is_configured(self) -> bool:
        return bool(settings.SMTP_USER and settings.SMTP_PASSWORD.get_secret_value())

    @Logger.io
    async def send_ticket(self, *, detail: TicketDetailEntity) -> bool:
        if not self.is_configured:
            Logger.base.warning('📭 [MAIL] SMTP credentials not configured, skipping ticket email')
            return False

        # QR and PDF rendering are CPU-bound; keep them off the event loop
        message = await to_thread.run_sync(partial(self.build_message, detail=detail))
        await aiosmtplib.send(
            message,
            hostname=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD.get_secret_value(),
            start_tls=settings.SMTP_START_TLS,
        )
        Logger.base.info(f'📧 [MAIL] Ticket {detail.ticket.id} sent to {detail.user_email}')
        return True

    def build_message(self, *, detail: TicketDetailEntity) -> EmailMessage:
        formatted_date = f'{detail.event_date_time:%B %d, %Y %H:%M}'
        qr_cid = make_msgid(domain='eventpass')

        message = EmailMessage()
        message['From'] = formataddr((settings.MAIL_FROM_NAME, settings.SMTP_USER))
        message['To'] = detail.user_email
        message['Subject'] = f'Your Ticket for {detail.event_title}'

        message.set_content(
            f"""Your Event Ticket

Hello {detail.user_name},

Thank you for booking a ticket for {detail.event_title}!

Ticket ID: {detail.ticket.id}
Date & Time: {formatted_date}
Location: {detail.event_location}
Category: {detail.event_category}

Your ticket PDF is attached to this email. Present the QR code at the event entrance.

View your tickets: {settings.FRONTEND_URL}/profile
"""
        )

        message.add_alternative(
            f"""<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; color: #333; max-width: 600px; margin: 0 auto;">
    <h1>&#127915; Your Event Ticket</h1>
    <h2>{escape(detail.event_title)}</h2>
    <p>Hello {escape(detail.user_name)},</p>
    <p><strong>Ticket ID:</strong> {escape(detail.ticket.id)}</p>
    <p><strong>Date &amp; Time:</strong> {escape(formatted_date)}</p>
    <p><strong>Location:</strong> {escape(detail.event_location)}</p>
    <p><strong>Category:</strong> {escape(detail.event_category)}</p>
    <p style="text-align: center;"><img src="cid:{qr_cid[1:-1]}" alt="Ticket QR Code" width="250"></p>
    <p>Your ticket PDF is attached. Present the QR code at the event entrance.</p>
    <p><a href="{escape(settings.FRONTEND_URL)}/profile">View my tickets</a></p>
  </body>
</html>
""",
            subtype='html',
        )

        qr_png = self.document_renderer.render_qr_png(payload=detail.qr_payload())
        message.get_payload()[1].add_related(qr_png, 'image', 'png', cid=qr_cid)

        message.add_attachment(
            self.document_renderer.render_pdf(detail=detail),
            maintype='application',
            subtype='pdf',
            filename=f'ticket-{detail.ticket.id}.pdf',
        )
        return message
