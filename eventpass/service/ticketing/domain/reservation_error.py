"""
Reservation ledger outcomes

Every rejected reserve / cancel / check-in is one of these types. Each carries a
stable ``ReservationErrorCode`` and inherits its HTTP status from the platform
exception it extends. Only ``TransientReservationError`` is worth retrying, and
only by re-running the whole operation.
"""

from enum import Enum

from eventpass.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ServiceUnavailableError,
)


class ReservationErrorCode(str, Enum):
    NOT_FOUND = 'NOT_FOUND'
    NOT_PUBLISHED = 'NOT_PUBLISHED'
    ALREADY_BOOKED = 'ALREADY_BOOKED'
    SOLD_OUT = 'SOLD_OUT'
    FORBIDDEN = 'FORBIDDEN'
    ALREADY_CHECKED_IN = 'ALREADY_CHECKED_IN'
    TRANSIENT = 'TRANSIENT'


class EventNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Event not found') -> None:
        super().__init__(message, code=ReservationErrorCode.NOT_FOUND.value)


class TicketNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Ticket not found') -> None:
        super().__init__(message, code=ReservationErrorCode.NOT_FOUND.value)


class EventNotPublishedError(DomainError):
    def __init__(self, message: str = 'Event is not published') -> None:
        super().__init__(message, code=ReservationErrorCode.NOT_PUBLISHED.value)


class AlreadyBookedError(ConflictError):
    def __init__(self, message: str = 'You already have a ticket for this event') -> None:
        super().__init__(message, code=ReservationErrorCode.ALREADY_BOOKED.value)


class SoldOutError(ConflictError):
    def __init__(self, message: str = 'Event is sold out') -> None:
        super().__init__(message, code=ReservationErrorCode.SOLD_OUT.value)


class TicketForbiddenError(ForbiddenError):
    def __init__(self, message: str = 'You do not have permission to modify this ticket') -> None:
        super().__init__(message, code=ReservationErrorCode.FORBIDDEN.value)


class AlreadyCheckedInError(DomainError):
    def __init__(self, message: str = 'Ticket has already been checked in') -> None:
        super().__init__(message, code=ReservationErrorCode.ALREADY_CHECKED_IN.value)


class TransientReservationError(ServiceUnavailableError):
    """
    The store did not answer in time or was unreachable.

    Outcome is unknown for a reserve: the deadline can fire after the transaction
    committed, so the ticket may exist. Retrying is safe because the (event, user)
    pair is unique; a retry that gets ``AlreadyBookedError`` means the earlier
    attempt went through and the ticket is listed under the caller's tickets.
    """

    def __init__(self, message: str = 'Ticket store temporarily unavailable, please retry') -> None:
        super().__init__(message, code=ReservationErrorCode.TRANSIENT.value)
