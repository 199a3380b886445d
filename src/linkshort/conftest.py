"""Pytest configuration and shared fixtures."""

import time
from typing import Any
from unittest.mock import AsyncMock, Mock, patch

import pytest
from fastapi.testclient import TestClient

from src.linkshort.auth.dependencies import set_jwt_validator
from src.linkshort.config import settings
from src.linkshort.main import app


@pytest.fixture(autouse=True)
def mock_posthog_client():
    """Keep analytics events from leaving the test process."""
    with patch("src.linkshort.services.posthog.posthog") as mock:
        yield mock


@pytest.fixture
def client() -> TestClient:
    """
    Provide FastAPI test client for page requests.

    Redirects are not followed so guard responses can be inspected.

    Example:
        >>> def test_health(client):
        >>>     response = client.get("/health")
        >>>     assert response.status_code == 200
    """
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def mock_user_id() -> str:
    """Provide a consistent Clerk-style user ID."""
    return "user_2abcDEF123"


@pytest.fixture
def session_token() -> str:
    """Provide an opaque session token; verification is mocked."""
    return "eyJhbGciOiJSUzI1NiIsImtpZCI6Imluc18xIn0.mock.token"


@pytest.fixture
def session_claims(mock_user_id: str) -> dict[str, Any]:
    """Provide verified Clerk session claims."""
    now = int(time.time())
    return {
        "sub": mock_user_id,
        "sid": "sess_2xyz789",
        "iss": settings.clerk_frontend_api_url,
        "azp": "http://localhost:8000",
        "iat": now,
        "nbf": now,
        "exp": now + 60,
    }


@pytest.fixture
def mock_jwt_validator():
    """Provide a mock JWT validator installed as the global validator."""
    validator = Mock()
    validator.verify_token = AsyncMock()
    set_jwt_validator(validator)
    yield validator
    set_jwt_validator(None)


@pytest.fixture
def signed_in_client(
    client: TestClient, mock_jwt_validator, session_token: str, session_claims: dict[str, Any]
) -> TestClient:
    """Test client whose requests carry a valid session cookie."""
    mock_jwt_validator.verify_token.return_value = session_claims
    client.cookies.set(settings.session_cookie_name, session_token)
    return client
