from abc import ABC, abstractmethod

from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity


class ITicketNotifier(ABC):
    """Port for delivering a booked ticket to its holder (email with QR and PDF)."""

    @abstractmethod
    async def send_ticket(self, *, detail: TicketDetailEntity) -> bool:
        """Return False when delivery is skipped (e.g. mail not configured)."""
        pass
