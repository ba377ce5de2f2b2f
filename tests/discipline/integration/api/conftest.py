"""Pytest fixtures for API integration tests.

Each test gets a fresh temp-file SQLite database. The schema is built in a
separate event loop before the TestClient starts its own, and the app's
session dependency is overridden to use the test engine.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from discipline.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    create_tables,
)
from discipline.presentation.api.app import API_V1_PREFIX, create_app
from discipline.presentation.api.dependencies import get_db_session
from discipline_config.settings import Settings

# Differs from the process-wide JWT_SECRET_KEY, so a route that ignored the
# app's own settings would issue tokens these tests cannot verify
TEST_JWT_SECRET = "api-suite-jwt-secret"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings backed by a temp SQLite file."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_backend="sqlite",
        sqlite_path=str(tmp_path / "api-test.db"),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def api_engine(api_settings):
    """Engine for the test database, schema created in a fresh event loop."""
    engine = create_engine(api_settings.database_url, poolclass=NullPool)

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(create_tables(engine))
    finally:
        loop.close()

    return engine


@pytest.fixture
def test_client(api_settings, api_engine):
    """Create a test client wired to the test database.

    The client is not used as a context manager, so the app lifespan (and
    with it the production engine) never starts.
    """
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        api_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Credentials of the user behind ``auth_headers``."""
    return {"name": "runner_1", "password": "SecurePassword123"}


def register_and_login(client: TestClient, prefix: str, credentials: dict) -> dict:
    """Register a user, log in, and return the login response body."""
    response = client.post(f"{prefix}/auth/register", json=credentials)
    assert response.status_code == 201, (
        f"Registration failed: {response.status_code} - {response.text}"
    )

    response = client.post(f"{prefix}/auth/login", json=credentials)
    assert response.status_code == 200, (
        f"Login failed: {response.status_code} - {response.text}"
    )
    return response.json()


@pytest.fixture
def login_data(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Login response for a freshly registered user."""
    return register_and_login(test_client, api_v1_prefix, registered_user_data)


@pytest.fixture
def auth_headers(login_data) -> dict:
    """Bearer headers for the registered user."""
    return {"Authorization": f"Bearer {login_data['token']}"}


@pytest.fixture
def other_auth_headers(test_client, api_v1_prefix) -> dict:
    """Bearer headers for a second, unrelated user."""
    data = register_and_login(
        test_client,
        api_v1_prefix,
        {"name": "walker_2", "password": "AnotherPassword456"},
    )
    return {"Authorization": f"Bearer {data['token']}"}
