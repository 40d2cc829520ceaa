"""Pytest fixtures for HTTP API tests.

Each test gets its own SQLite database file, so nothing here needs Docker.
The lifespan (run by entering the TestClient) creates the tables.
"""

import pytest
from fastapi.testclient import TestClient

from snipbox.domain.shared.time import utc_now
from snipbox.presentation.api.app import create_app
from snipbox.presentation.api.context import AppContext
from snipbox_config.settings import Settings

from tests.shared.fixtures import FakeClock


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test settings: throwaway database, plain-HTTP cookies, fast hashing."""
    return Settings(
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        session_cookie_secure=False,  # Allow HTTP in tests
        password_hash_rounds=4,
        latest_snippets_limit=3,
        api_debug=True,
    )


@pytest.fixture
def test_client(api_settings):
    """Client that does not follow redirects, so 303s can be inspected."""
    app = create_app(settings=api_settings)
    with TestClient(app, follow_redirects=False) as client:
        yield client


@pytest.fixture
def api_clock() -> FakeClock:
    # Starts at the real time so cookie expiry dates lie in the future
    return FakeClock(utc_now())


@pytest.fixture
def clocked_client(api_settings, api_clock):
    """Client whose application reads time from ``api_clock``."""
    context = AppContext.from_settings(api_settings, clock=api_clock)
    app = create_app(context=context)
    with TestClient(app, follow_redirects=False) as client:
        yield client


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "password": "SecurePassword123!",
    }


def _sign_up_and_log_in(client: TestClient, user_data: dict) -> TestClient:
    response = client.post("/user/signup", json=user_data)
    assert response.status_code == 303, f"Signup failed: {response.text}"

    response = client.post(
        "/user/login",
        json={"email": user_data["email"], "password": user_data["password"]},
    )
    assert response.status_code == 303, f"Login failed: {response.text}"
    return client


@pytest.fixture
def logged_in_client(test_client, registered_user_data) -> TestClient:
    return _sign_up_and_log_in(test_client, registered_user_data)


@pytest.fixture
def logged_in_clocked_client(clocked_client, registered_user_data) -> TestClient:
    return _sign_up_and_log_in(clocked_client, registered_user_data)
