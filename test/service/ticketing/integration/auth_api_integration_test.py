"""Integration tests for /api/auth: signup, login, logout, me, profile"""

from fastapi.testclient import TestClient
import pytest

from eventpass.platform.constant.route_constant import (
    AUTH_BASE,
    AUTH_LOGIN,
    AUTH_LOGOUT,
    AUTH_PROFILE,
    AUTH_SIGNUP,
)


AUTH_ME = f'{AUTH_BASE}/me'


@pytest.mark.integration
class TestSignup:
    def test_signup__user_and_token(self, client: TestClient) -> None:
        response = client.post(
            AUTH_SIGNUP,
            json={
                'email': 'alice@example.com',
                'name': 'Alice',
                'password': 'P@ssw0rd',
                'phone': '0912345678',
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body['user']['email'] == 'alice@example.com'
        assert body['user']['role'] == 'user'
        assert body['token_type'] == 'bearer'
        assert body['token']
        assert 'password' not in body['user']
        assert 'hashed_password' not in body['user']

    def test_duplicate_email__conflict(self, client: TestClient, signup_user) -> None:
        signup_user('alice@example.com')

        response = client.post(
            AUTH_SIGNUP,
            json={'email': 'alice@example.com', 'name': 'Alice 2', 'password': 'P@ssw0rd', 'phone': '1'},
        )

        assert response.status_code == 409

    @pytest.mark.parametrize(
        'payload',
        [
            {'email': 'not-an-email', 'name': 'A', 'password': 'P@ssw0rd', 'phone': '1'},
            {'email': 'a@example.com', 'name': 'A', 'password': '123', 'phone': '1'},
            {'email': 'a@example.com', 'name': '', 'password': 'P@ssw0rd', 'phone': '1'},
        ],
    )
    def test_invalid_payload__400(self, client: TestClient, payload: dict) -> None:
        assert client.post(AUTH_SIGNUP, json=payload).status_code == 400


@pytest.mark.integration
class TestLogin:
    def test_login_success(self, client: TestClient, signup_user) -> None:
        signup_user('alice@example.com', name='Alice')

        response = client.post(AUTH_LOGIN, json={'email': 'alice@example.com', 'password': 'P@ssw0rd'})

        assert response.status_code == 200
        assert response.json()['user']['name'] == 'Alice'

    def test_wrong_password_and_unknown_email__same_401(
        self, client: TestClient, signup_user
    ) -> None:
        signup_user('alice@example.com')

        wrong_password = client.post(
            AUTH_LOGIN, json={'email': 'alice@example.com', 'password': 'wrong-password'}
        )
        unknown_email = client.post(
            AUTH_LOGIN, json={'email': 'nobody@example.com', 'password': 'wrong-password'}
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()


@pytest.mark.integration
class TestSession:
    def test_me(self, client: TestClient, signup_user) -> None:
        alice = signup_user('alice@example.com', name='Alice')

        response = client.get(AUTH_ME, headers=alice['headers'])

        assert response.status_code == 200
        assert response.json()['id'] == alice['id']

    @pytest.mark.parametrize('headers', [{}, {'Authorization': 'Bearer not-a-jwt'}])
    def test_me_unauthenticated__401(self, client: TestClient, headers: dict) -> None:
        assert client.get(AUTH_ME, headers=headers).status_code == 401

    def test_logout(self, client: TestClient, signup_user) -> None:
        alice = signup_user('alice@example.com')

        response = client.post(AUTH_LOGOUT, headers=alice['headers'])

        assert response.status_code == 200
        assert response.json() == {'message': 'Logout successful'}


@pytest.mark.integration
class TestProfile:
    def test_update_profile(self, client: TestClient, signup_user) -> None:
        alice = signup_user('alice@example.com', name='Alice')

        response = client.put(
            AUTH_PROFILE, json={'name': 'Alice Johnson', 'phone': '+1 555 0104'}, headers=alice['headers']
        )

        assert response.status_code == 200
        assert response.json()['name'] == 'Alice Johnson'
        assert response.json()['phone'] == '+1 555 0104'

    def test_empty_update__400(self, client: TestClient, signup_user) -> None:
        alice = signup_user('alice@example.com')

        response = client.put(AUTH_PROFILE, json={}, headers=alice['headers'])

        assert response.status_code == 400
