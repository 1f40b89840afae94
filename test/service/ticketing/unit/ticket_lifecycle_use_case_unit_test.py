"""
Unit tests for CancelTicketUseCase and CheckInTicketUseCase

Both are thin: they bound the ledger call with the ledger deadline and let the
ledger's typed rejections through.
"""

from unittest.mock import AsyncMock

import pytest

from eventpass.service.ticketing.app.command.cancel_ticket_use_case import CancelTicketUseCase
from eventpass.service.ticketing.app.command.check_in_ticket_use_case import CheckInTicketUseCase
from eventpass.service.ticketing.app.interface.i_reservation_ledger import IReservationLedger
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.domain.reservation_error import (
    AlreadyCheckedInError,
    TicketForbiddenError,
    TicketNotFoundError,
)


@pytest.fixture
def actor() -> UserEntity:
    return UserEntity(id=7, email='holder@example.com', name='Holder')


@pytest.fixture
def mock_ledger() -> AsyncMock:
    return AsyncMock(spec=IReservationLedger)


@pytest.mark.unit
class TestCancelTicketUseCase:
    @pytest.mark.asyncio
    async def test_cancel_success(self, mock_ledger: AsyncMock, actor: UserEntity) -> None:
        cancelled = TicketEntity(id='t-1', event_id=1, user_id=7)
        mock_ledger.cancel.return_value = cancelled

        result = await CancelTicketUseCase(reservation_ledger=mock_ledger).execute(
            ticket_id='t-1', actor=actor
        )

        mock_ledger.cancel.assert_awaited_once_with(ticket_id='t-1', actor=actor)
        assert result is cancelled

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'error, status_code',
        [
            (TicketNotFoundError(), 404),
            (TicketForbiddenError(), 403),
            (AlreadyCheckedInError('Checked-in tickets cannot be cancelled'), 400),
        ],
    )
    async def test_cancel_rejections_propagate(
        self, mock_ledger: AsyncMock, actor: UserEntity, error: Exception, status_code: int
    ) -> None:
        mock_ledger.cancel.side_effect = error

        with pytest.raises(type(error)) as exc_info:
            await CancelTicketUseCase(reservation_ledger=mock_ledger).execute(
                ticket_id='t-1', actor=actor
            )

        assert exc_info.value.status_code == status_code


@pytest.mark.unit
class TestCheckInTicketUseCase:
    @pytest.mark.asyncio
    async def test_check_in_success(self, mock_ledger: AsyncMock, actor: UserEntity) -> None:
        checked_in = TicketEntity(id='t-1', event_id=1, user_id=9, check_in=True)
        mock_ledger.check_in.return_value = checked_in

        result = await CheckInTicketUseCase(reservation_ledger=mock_ledger).execute(
            ticket_id='t-1', actor=actor
        )

        mock_ledger.check_in.assert_awaited_once_with(ticket_id='t-1', actor=actor)
        assert result.check_in is True

    @pytest.mark.asyncio
    async def test_check_in_twice__already_checked_in(
        self, mock_ledger: AsyncMock, actor: UserEntity
    ) -> None:
        mock_ledger.check_in.side_effect = AlreadyCheckedInError()

        with pytest.raises(AlreadyCheckedInError):
            await CheckInTicketUseCase(reservation_ledger=mock_ledger).execute(
                ticket_id='t-1', actor=actor
            )
