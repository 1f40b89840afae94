"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database, migrated with Alembic once per session
- Row cleanup between integration tests
- A TestClient around the test app (see test_main.py)
- Helpers to sign up users, promote admins and create events through the API

Architecture:
- Unit tests (@pytest.mark.unit): mocked collaborators, never touch the database
- Integration tests: real SQLite file, cleaned before every test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once, at import time of eventpass.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


_TEST_DB_PATH = Path(tempfile.mkdtemp(prefix='eventpass_test_')) / 'eventpass_test.db'


def _early_setup_test_environment() -> None:
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{_TEST_DB_PATH}'
    os.environ['BCRYPT_ROUNDS'] = '4'
    os.environ['SECRET_KEY'] = 'test_secret_key'
    os.environ['SMTP_USER'] = ''
    os.environ['SMTP_PASSWORD'] = ''

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import AsyncIterator, Callable, Generator  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from eventpass.platform.constant.route_constant import (  # noqa: E402
    AUTH_LOGIN,
    AUTH_SIGNUP,
    EVENT_CREATE,
)
from eventpass.platform.database.orm_db_setting import Database, dispose_engine  # noqa: E402


DEFAULT_PASSWORD = 'P@ssw0rd'

# Child tables first
_TABLES = ('ticket', 'event', '"user"')


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    alembic_cfg = Config(str(Path(__file__).parent.parent / 'alembic.ini'))
    command.upgrade(alembic_cfg, 'head')


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            # Clean before any function-scoped fixture seeds rows
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Cleanup
# =============================================================================
def _sync_engine():
    # stdlib sqlite3 driver; cleanup runs outside any event loop
    return create_engine(f'sqlite:///{_TEST_DB_PATH}')


@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    engine = _sync_engine()
    with engine.begin() as conn:
        for table in _TABLES:
            conn.execute(text(f'DELETE FROM {table}'))
    engine.dispose()
    yield


@pytest.fixture
def execute_sql_statement() -> Callable[..., list[dict[str, Any]] | None]:
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        engine = _sync_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(text(statement), params or {})
                if fetch:
                    return [dict(row._mapping) for row in result]
            return None
        finally:
            engine.dispose()

    return _execute


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    """Session factory bound to the test loop; the engine is disposed afterwards."""
    yield Database()
    await dispose_engine()


# =============================================================================
# HTTP Client
# =============================================================================
@pytest.fixture(scope='module')
def client() -> Generator[TestClient, None, None]:
    from test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def task_group_mock(client: TestClient) -> Any:
    """The background task group the test app installs in the container."""
    from eventpass.platform.config.di import container

    task_group = container.task_group()
    task_group.reset_mock()
    return task_group


@pytest.fixture
def signup_user(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _signup(
        email: str, name: str = 'Test User', password: str = DEFAULT_PASSWORD, phone: str = '0912345678'
    ) -> dict[str, Any]:
        response = client.post(
            AUTH_SIGNUP, json={'email': email, 'name': name, 'password': password, 'phone': phone}
        )
        assert response.status_code == 201, f'Signup failed: {response.text}'
        body = response.json()
        return {**body['user'], 'token': body['token'], 'headers': _bearer(body['token'])}

    return _signup


@pytest.fixture
def login_user(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, Any]:
        response = client.post(AUTH_LOGIN, json={'email': email, 'password': password})
        assert response.status_code == 200, f'Login failed: {response.text}'
        body = response.json()
        return {**body['user'], 'token': body['token'], 'headers': _bearer(body['token'])}

    return _login


@pytest.fixture
def admin_user(
    signup_user: Callable[..., dict[str, Any]],
    login_user: Callable[..., dict[str, Any]],
    execute_sql_statement: Callable[..., Any],
) -> dict[str, Any]:
    """Signup always yields a regular user; promote in the DB then log in again for an admin token."""
    signup_user('admin@example.com', name='Admin User')
    execute_sql_statement(
        'UPDATE "user" SET role = :role WHERE email = :email',
        {'role': 'admin', 'email': 'admin@example.com'},
    )
    return login_user('admin@example.com')


@pytest.fixture
def create_event(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _create(headers: dict[str, str], **overrides: Any) -> dict[str, Any]:
        payload = {
            'title': 'Summer Music Festival',
            'description': 'Three stages, one weekend',
            'date_time': (datetime.now(timezone.utc) + timedelta(days=30)).isoformat(),
            'location': 'Riverside Park',
            'category': 'Festival',
            'status': 'published',
            'quantity': 100,
            **overrides,
        }
        response = client.post(EVENT_CREATE, json=payload, headers=headers)
        assert response.status_code == 201, f'Create event failed: {response.text}'
        return response.json()

    return _create


def _bearer(token: str) -> dict[str, str]:
    return {'Authorization': f'Bearer {token}'}
