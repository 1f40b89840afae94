from abc import ABC, abstractmethod

from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity


class ITicketDocumentRenderer(ABC):
    @abstractmethod
    def render_qr_png(self, *, payload: str, box_size: int = 10) -> bytes:
        pass

    @abstractmethod
    def render_qr_data_url(self, *, payload: str) -> str:
        pass

    @abstractmethod
    def render_pdf(self, *, detail: TicketDetailEntity) -> bytes:
        pass
