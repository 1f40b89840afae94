"""Integration tests for /api/admin and /health"""

from fastapi.testclient import TestClient
import pytest

from eventpass.platform.constant.route_constant import ADMIN_EVENTS, ADMIN_USERS, TICKET_BOOK


@pytest.mark.integration
class TestAdminEndpoints:
    @pytest.mark.parametrize('url', [ADMIN_USERS, ADMIN_EVENTS])
    def test_regular_user__403(self, client: TestClient, signup_user, url: str) -> None:
        alice = signup_user('alice@example.com')

        response = client.get(url, headers=alice['headers'])

        assert response.status_code == 403
        assert response.json()['detail'] == 'Access denied. Admin privileges required.'

    @pytest.mark.parametrize('url', [ADMIN_USERS, ADMIN_EVENTS])
    def test_anonymous__401(self, client: TestClient, url: str) -> None:
        assert client.get(url).status_code == 401

    def test_users_with_counts__ordered_by_name(
        self, client: TestClient, signup_user, admin_user, create_event
    ) -> None:
        zoe = signup_user('zoe@example.com', name='Zoe')
        bob = signup_user('bob@example.com', name='Bob')
        event = create_event(zoe['headers'])
        create_event(zoe['headers'], status='drafted')
        client.post(TICKET_BOOK, json={'event_id': event['id']}, headers=bob['headers'])

        response = client.get(ADMIN_USERS, headers=admin_user['headers'])

        assert response.status_code == 200
        users = response.json()
        assert [u['name'] for u in users] == ['Admin User', 'Bob', 'Zoe']
        by_name = {u['name']: u for u in users}
        assert (by_name['Zoe']['event_count'], by_name['Zoe']['ticket_count']) == (2, 0)
        assert (by_name['Bob']['event_count'], by_name['Bob']['ticket_count']) == (0, 1)
        assert by_name['Admin User']['role'] == 'admin'

    def test_all_events_including_drafts(
        self, client: TestClient, signup_user, admin_user, create_event
    ) -> None:
        alice = signup_user('alice@example.com')
        create_event(alice['headers'])
        create_event(alice['headers'], status='drafted')

        response = client.get(ADMIN_EVENTS, headers=admin_user['headers'])

        assert response.status_code == 200
        assert sorted(e['status'] for e in response.json()) == ['drafted', 'published']


@pytest.mark.integration
class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'
