"""
Fixtures for the mocked users API suite
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

USERS_API_BASE_URL = "https://api.example.com"


@pytest.fixture(autouse=True)
def users_api_env(monkeypatch):
    """Pin the base URL so URL assertions do not depend on a local .env"""
    monkeypatch.setenv("USERS_API_BASE_URL", USERS_API_BASE_URL)


@pytest.fixture
def mocked_get():
    """Replace httpx.AsyncClient.get; a fresh mock per test"""
    with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mocked:
        yield mocked


@pytest.fixture
def make_response():
    def _make(status_code: int, payload=None, url: str = f"{USERS_API_BASE_URL}/users/1") -> httpx.Response:
        request = httpx.Request("GET", url)
        if payload is None:
            return httpx.Response(status_code, request=request)
        return httpx.Response(status_code, json=payload, request=request)
    return _make


@pytest.fixture
def make_status_error(make_response):
    def _make(status_code: int, payload, url: str = f"{USERS_API_BASE_URL}/users/1") -> httpx.HTTPStatusError:
        response = make_response(status_code, payload, url)
        return httpx.HTTPStatusError(
            f"HTTP {status_code} for url '{url}'",
            request=response.request,
            response=response,
        )
    return _make


@pytest.fixture
def mock_user_data():
    return {
        "id": 1,
        "name": "John Doe",
        "email": "john.doe@example.com",
        "username": "johndoe",
        "phone": "+1-555-123-4567",
        "address": {
            "street": "123 Main St",
            "city": "New York",
            "state": "NY",
            "zipcode": "10001",
            "country": "USA"
        },
        "company": {
            "name": "Doe Enterprises",
            "industry": "Technology",
            "position": "Software Engineer"
        },
        "dob": "1990-05-15",
        "profile_picture_url": "https://example.com/images/johndoe.jpg",
        "is_active": True,
        "created_at": "2023-01-01T12:00:00Z",
        "updated_at": "2023-10-01T12:00:00Z",
        "preferences": {
            "language": "en",
            "timezone": "America/New_York",
            "notifications_enabled": True
        }
    }


@pytest.fixture
def mock_error_responses():
    return {
        403: {
            "error": "Forbidden",
            "details": "You do not have permission to access this resource",
            "status": 403,
            "timestamp": "2023-12-01T12:00:00Z"
        },
        404: {
            "error": "Not Found",
            "details": "User with the specified ID was not found",
            "status": 404,
            "timestamp": "2023-12-01T12:00:00Z"
        },
        502: {
            "error": "Bad Gateway",
            "details": "The server received an invalid response from the upstream server",
            "status": 502,
            "timestamp": "2023-12-01T12:00:00Z"
        }
    }
