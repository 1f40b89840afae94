"""
Integration tests for /api/tickets

Booking, cancellation and check-in through HTTP, asserting status codes and the
stable error codes clients branch on. The background task group is a MagicMock
(see test_main.py), so bookings record the email hand-off without sending mail.
"""

import base64
from typing import Any

from fastapi.testclient import TestClient
import pytest

from eventpass.platform.constant.route_constant import (
    EVENT_GET,
    TICKET_BOOK,
    TICKET_CANCEL,
    TICKET_CHECK_IN,
    TICKET_MINE,
    TICKET_PDF,
    TICKET_QRCODE,
)


def _book(client: TestClient, user: dict[str, Any], event_id: int):
    return client.post(TICKET_BOOK, json={'event_id': event_id}, headers=user['headers'])


@pytest.fixture
def owner(signup_user) -> dict[str, Any]:
    return signup_user('owner@example.com', name='Event Owner')


@pytest.fixture
def alice(signup_user) -> dict[str, Any]:
    return signup_user('alice@example.com', name='Alice')


@pytest.fixture
def bob(signup_user) -> dict[str, Any]:
    return signup_user('bob@example.com', name='Bob')


@pytest.mark.integration
class TestBookTicket:
    def test_book__201_and_email_handed_off(
        self, client: TestClient, owner, alice, create_event, task_group_mock
    ) -> None:
        event = create_event(owner['headers'], quantity=2)

        response = _book(client, alice, event['id'])

        assert response.status_code == 201
        ticket = response.json()
        assert ticket['event_id'] == event['id']
        assert ticket['user_id'] == alice['id']
        assert ticket['check_in'] is False
        task_group_mock.start_soon.assert_called_once()
        assert task_group_mock.start_soon.call_args.args[1] == ticket['id']

        remaining = client.get(EVENT_GET.format(event_id=event['id']), headers=owner['headers'])
        assert remaining.json()['tickets_issued'] == 1
        assert remaining.json()['remaining'] == 1

    def test_book_twice__409_already_booked(
        self, client: TestClient, owner, alice, create_event
    ) -> None:
        event = create_event(owner['headers'])
        _book(client, alice, event['id'])

        response = _book(client, alice, event['id'])

        assert response.status_code == 409
        assert response.json()['code'] == 'ALREADY_BOOKED'

    def test_sold_out__409(self, client: TestClient, owner, alice, bob, create_event) -> None:
        event = create_event(owner['headers'], quantity=1)
        _book(client, alice, event['id'])

        response = _book(client, bob, event['id'])

        assert response.status_code == 409
        assert response.json()['code'] == 'SOLD_OUT'

    def test_drafted__400_not_published(
        self, client: TestClient, owner, alice, create_event, task_group_mock
    ) -> None:
        event = create_event(owner['headers'], status='drafted')

        response = _book(client, alice, event['id'])

        assert response.status_code == 400
        assert response.json()['code'] == 'NOT_PUBLISHED'
        task_group_mock.start_soon.assert_not_called()

    def test_missing_event__404(self, client: TestClient, alice) -> None:
        response = _book(client, alice, 999_999)

        assert response.status_code == 404
        assert response.json()['code'] == 'NOT_FOUND'

    def test_unauthenticated__401(self, client: TestClient) -> None:
        assert client.post(TICKET_BOOK, json={'event_id': 1}).status_code == 401

    def test_my_tickets(self, client: TestClient, owner, alice, create_event) -> None:
        first = create_event(owner['headers'], title='First')
        second = create_event(owner['headers'], title='Second')
        _book(client, alice, first['id'])
        _book(client, alice, second['id'])

        response = client.get(TICKET_MINE, headers=alice['headers'])

        assert response.status_code == 200
        assert sorted(t['event']['title'] for t in response.json()) == ['First', 'Second']
        assert all(t['user']['email'] == 'alice@example.com' for t in response.json())


@pytest.mark.integration
class TestCancelTicket:
    def test_cancel__frees_capacity(
        self, client: TestClient, owner, alice, bob, create_event
    ) -> None:
        event = create_event(owner['headers'], quantity=1)
        ticket = _book(client, alice, event['id']).json()

        response = client.delete(TICKET_CANCEL.format(ticket_id=ticket['id']), headers=alice['headers'])

        assert response.status_code == 200
        assert response.json()['id'] == ticket['id']
        assert _book(client, bob, event['id']).status_code == 201

    def test_cancel_other_users_ticket__403(
        self, client: TestClient, owner, alice, bob, create_event
    ) -> None:
        event = create_event(owner['headers'])
        ticket = _book(client, alice, event['id']).json()

        response = client.delete(TICKET_CANCEL.format(ticket_id=ticket['id']), headers=bob['headers'])

        assert response.status_code == 403
        assert response.json()['code'] == 'FORBIDDEN'

    def test_admin_cancel_other_users_ticket__403(
        self, client: TestClient, owner, alice, admin_user, create_event
    ) -> None:
        event = create_event(owner['headers'], quantity=1)
        ticket = _book(client, alice, event['id']).json()

        response = client.delete(
            TICKET_CANCEL.format(ticket_id=ticket['id']), headers=admin_user['headers']
        )

        assert response.status_code == 403
        assert response.json()['code'] == 'FORBIDDEN'
        mine = client.get(TICKET_MINE, headers=alice['headers']).json()
        assert [t['id'] for t in mine] == [ticket['id']]

    def test_cancel_missing__404(self, client: TestClient, alice) -> None:
        response = client.delete(TICKET_CANCEL.format(ticket_id='no-such-ticket'), headers=alice['headers'])

        assert response.status_code == 404
        assert response.json()['code'] == 'NOT_FOUND'


@pytest.mark.integration
class TestCheckIn:
    def test_owner_checks_in__then_cancel_rejected(
        self, client: TestClient, owner, alice, create_event
    ) -> None:
        """
        Given: Alice holds a ticket
        When: the event owner checks it in
        Then: the ticket is frozen: Alice can no longer cancel it
        """
        event = create_event(owner['headers'])
        ticket = _book(client, alice, event['id']).json()

        checked_in = client.post(TICKET_CHECK_IN.format(ticket_id=ticket['id']), headers=owner['headers'])
        cancel = client.delete(TICKET_CANCEL.format(ticket_id=ticket['id']), headers=alice['headers'])

        assert checked_in.status_code == 200
        assert checked_in.json()['check_in'] is True
        assert checked_in.json()['check_in_at'] is not None
        assert cancel.status_code == 400
        assert cancel.json()['code'] == 'ALREADY_CHECKED_IN'

    def test_check_in_twice__400(self, client: TestClient, owner, alice, create_event) -> None:
        event = create_event(owner['headers'])
        ticket = _book(client, alice, event['id']).json()
        url = TICKET_CHECK_IN.format(ticket_id=ticket['id'])
        client.post(url, headers=owner['headers'])

        response = client.post(url, headers=owner['headers'])

        assert response.status_code == 400
        assert response.json()['code'] == 'ALREADY_CHECKED_IN'

    def test_holder_cannot_check_in__403(
        self, client: TestClient, owner, alice, create_event
    ) -> None:
        event = create_event(owner['headers'])
        ticket = _book(client, alice, event['id']).json()

        response = client.post(TICKET_CHECK_IN.format(ticket_id=ticket['id']), headers=alice['headers'])

        assert response.status_code == 403

    def test_admin_checks_in(
        self, client: TestClient, owner, alice, admin_user, create_event
    ) -> None:
        event = create_event(owner['headers'])
        ticket = _book(client, alice, event['id']).json()

        response = client.post(
            TICKET_CHECK_IN.format(ticket_id=ticket['id']), headers=admin_user['headers']
        )

        assert response.status_code == 200


@pytest.mark.integration
class TestTicketDocuments:
    def test_qr_code__holder_only(
        self, client: TestClient, owner, alice, bob, create_event
    ) -> None:
        event = create_event(owner['headers'], title='Board Game Night')
        ticket = _book(client, alice, event['id']).json()
        url = TICKET_QRCODE.format(ticket_id=ticket['id'])

        response = client.get(url, headers=alice['headers'])

        assert response.status_code == 200
        body = response.json()
        assert body['ticket_id'] == ticket['id']
        assert body['event_title'] == 'Board Game Night'
        prefix = 'data:image/png;base64,'
        assert body['qr_code'].startswith(prefix)
        assert base64.b64decode(body['qr_code'][len(prefix):]).startswith(b'\x89PNG')

        assert client.get(url, headers=bob['headers']).status_code == 403

    def test_pdf_download(self, client: TestClient, owner, alice, create_event) -> None:
        event = create_event(owner['headers'])
        ticket = _book(client, alice, event['id']).json()

        response = client.get(TICKET_PDF.format(ticket_id=ticket['id']), headers=alice['headers'])

        assert response.status_code == 200
        assert response.headers['content-type'] == 'application/pdf'
        assert f'ticket-{ticket["id"]}.pdf' in response.headers['content-disposition']
        assert response.content.startswith(b'%PDF')

    def test_pdf_missing__404(self, client: TestClient, alice) -> None:
        response = client.get(TICKET_PDF.format(ticket_id='no-such-ticket'), headers=alice['headers'])

        assert response.status_code == 404
