"""
Shared test fixtures for connector tests
Uses pytest-httpx for mocking HTTP calls
"""

import re
from typing import Dict, Any, List

import httpx
import pytest
import pytest_asyncio
from pytest_httpx import HTTPXMock

from cloudbeds_connector.client import CloudbedsClient

API_BASE = "https://hotels.cloudbeds.com/api/v1.2"


def endpoint_url(endpoint: str) -> re.Pattern:
    """Match an endpoint regardless of its query string"""
    return re.compile(re.escape(f"{API_BASE}{endpoint}") + r"(\?.*)?$")


def make_page(start: int, size: int) -> List[Dict[str, Any]]:
    """Build a page of reservation-like items with sequential ids"""
    return [{"reservationID": f"RES{start + i}"} for i in range(size)]


def query_of(request: httpx.Request) -> Dict[str, str]:
    return dict(request.url.params)


@pytest.fixture
def api_key_credentials() -> Dict[str, Any]:
    return {"authType": "apiKey", "apiKey": "test-api-key"}


@pytest.fixture
def oauth2_credentials() -> Dict[str, Any]:
    return {
        "authType": "oauth2",
        "clientId": "test-client",
        "clientSecret": "test-secret",
        "accessToken": "test-access-token",
        "refreshToken": "test-refresh-token",
    }


@pytest.fixture
def client_config(api_key_credentials) -> Dict[str, Any]:
    """Test configuration with an API key credential"""
    return {
        "credentials": api_key_credentials,
        "property_id": "PROP01",
        "timeout": 5,
    }


@pytest_asyncio.fixture
async def cloudbeds_client(client_config):
    """Connected client, closed after the test"""
    client = CloudbedsClient(client_config)
    await client.connect()
    yield client
    await client.disconnect()


@pytest.fixture
def hotels_response() -> Dict[str, Any]:
    """Mock /getHotels envelope"""
    return {
        "success": True,
        "data": [
            {"propertyID": "PROP01", "propertyName": "Demo Hotel"},
            {"propertyID": "PROP02", "propertyName": "Demo Hostel"},
        ],
        "count": 2,
        "total": 2,
    }


@pytest.fixture
def mock_get_hotels(httpx_mock: HTTPXMock, hotels_response: Dict[str, Any]):
    """Mock the credential test endpoint"""
    httpx_mock.add_response(
        method="GET",
        url=endpoint_url("/getHotels"),
        json=hotels_response,
    )


@pytest.fixture
def mock_api_error(httpx_mock: HTTPXMock):
    """Envelope-level failure delivered with HTTP 200"""
    httpx_mock.add_response(
        json={
            "success": False,
            "message": "Invalid property ID",
            "errors": ["Property not found", "Check propertyID"],
        },
        status_code=200,
    )


@pytest.fixture
def webhooks_response() -> Dict[str, Any]:
    return {
        "success": True,
        "data": [
            {
                "webhookID": "WH1",
                "url": "https://hooks.example.com/cloudbeds",
                "event": "reservation_created",
            },
            {
                "webhookID": "WH2",
                "url": "https://hooks.example.com/cloudbeds",
                "event": "payment_received",
            },
        ],
    }
