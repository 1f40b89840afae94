"""
Unit tests for SendTicketNotificationUseCase

It runs detached from the booking request, so every failure must end here:
logged, reported as False, never raised.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from eventpass.service.ticketing.app.command.send_ticket_notification_use_case import (
    SendTicketNotificationUseCase,
)
from eventpass.service.ticketing.app.interface.i_ticket_notifier import ITicketNotifier
from eventpass.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketDetailEntity, TicketEntity


@pytest.fixture
def ticket_detail() -> TicketDetailEntity:
    return TicketDetailEntity(
        ticket=TicketEntity(id='t-1', event_id=1, user_id=7),
        event_title='Board Game Night',
        event_date_time=datetime(2026, 11, 5, 19, 0, tzinfo=timezone.utc),
        event_location='The Game Hub',
        event_category='Games',
        event_owner_id=3,
        user_name='Alice',
        user_email='alice@example.com',
    )


@pytest.fixture
def mock_ticket_query_repo(ticket_detail: TicketDetailEntity) -> AsyncMock:
    repo = AsyncMock(spec=ITicketQueryRepo)
    repo.get_detail.return_value = ticket_detail
    return repo


@pytest.fixture
def mock_notifier() -> AsyncMock:
    notifier = AsyncMock(spec=ITicketNotifier)
    notifier.send_ticket.return_value = True
    return notifier


@pytest.fixture
def use_case(
    mock_ticket_query_repo: AsyncMock, mock_notifier: AsyncMock
) -> SendTicketNotificationUseCase:
    return SendTicketNotificationUseCase(
        ticket_query_repo=mock_ticket_query_repo, ticket_notifier=mock_notifier
    )


@pytest.mark.unit
class TestSendTicketNotificationUseCase:
    @pytest.mark.asyncio
    async def test_send_success(
        self,
        use_case: SendTicketNotificationUseCase,
        mock_notifier: AsyncMock,
        ticket_detail: TicketDetailEntity,
    ) -> None:
        assert await use_case.execute('t-1') is True
        mock_notifier.send_ticket.assert_awaited_once_with(detail=ticket_detail)

    @pytest.mark.asyncio
    async def test_ticket_cancelled_before_send__skipped(
        self,
        use_case: SendTicketNotificationUseCase,
        mock_ticket_query_repo: AsyncMock,
        mock_notifier: AsyncMock,
    ) -> None:
        mock_ticket_query_repo.get_detail.return_value = None

        assert await use_case.execute('t-1') is False
        mock_notifier.send_ticket.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_smtp_failure__swallowed(
        self, use_case: SendTicketNotificationUseCase, mock_notifier: AsyncMock
    ) -> None:
        """
        Given: the SMTP server refuses the message
        When: the notification runs
        Then: nothing is raised to the task group
        """
        mock_notifier.send_ticket.side_effect = ConnectionRefusedError('smtp down')

        assert await use_case.execute('t-1') is False

    @pytest.mark.asyncio
    async def test_lookup_failure__swallowed(
        self, use_case: SendTicketNotificationUseCase, mock_ticket_query_repo: AsyncMock
    ) -> None:
        mock_ticket_query_repo.get_detail.side_effect = RuntimeError('db gone')

        assert await use_case.execute('t-1') is False
