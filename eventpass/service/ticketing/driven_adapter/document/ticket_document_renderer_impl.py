"""
Ticket documents: QR code PNGs (qrcode + pillow) and printable PDF tickets (reportlab).
"""

import base64
import io

import qrcode
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from eventpass.service.ticketing.app.interface.i_ticket_document_renderer import (
    ITicketDocumentRenderer,
)
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity


class TicketDocumentRendererImpl(ITicketDocumentRenderer):
    def render_qr_png(self, *, payload: str, box_size: int = 10) -> bytes:
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=box_size,
            border=2,
        )
        qr.add_data(payload)
        qr.make(fit=True)

        img = qr.make_image(fill_color='black', back_color='white')
        buffer = io.BytesIO()
        img.save(buffer, format='PNG')
        return buffer.getvalue()

    def render_qr_data_url(self, *, payload: str) -> str:
        png = self.render_qr_png(payload=payload)
        return f'data:image/png;base64,{base64.b64encode(png).decode("utf-8")}'

    def render_pdf(self, *, detail: TicketDetailEntity) -> bytes:
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        width, height = A4
        pdf.setTitle(f'Ticket {detail.ticket.id}')

        pdf.setFont('Helvetica-Bold', 24)
        pdf.drawCentredString(width / 2, height - 70, 'Event Ticket')
        pdf.setFont('Helvetica-Bold', 18)
        pdf.drawCentredString(width / 2, height - 110, detail.event_title)

        pdf.setFont('Helvetica', 12)
        y = height - 160
        for line in (
            f'Ticket ID: {detail.ticket.id}',
            f'Event Date: {detail.event_date_time:%Y-%m-%d %H:%M}',
            f'Location: {detail.event_location}',
            f'Category: {detail.event_category}',
            f'Attendee: {detail.user_name}',
            f'Email: {detail.user_email}',
        ):
            pdf.drawString(70, y, line)
            y -= 22

        qr_size = 200
        qr_image = ImageReader(io.BytesIO(self.render_qr_png(payload=detail.qr_payload(), box_size=8)))
        pdf.drawImage(qr_image, (width - qr_size) / 2, y - qr_size - 20, qr_size, qr_size)

        pdf.setFont('Helvetica-Oblique', 10)
        pdf.setFillGray(0.5)
        pdf.drawCentredString(width / 2, y - qr_size - 45, 'Scan QR code for check-in')

        pdf.showPage()
        pdf.save()
        return buffer.getvalue()
