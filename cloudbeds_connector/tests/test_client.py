"""
Tests for CloudbedsClient request handling using pytest-httpx
"""

import json
from datetime import date

import httpx
import pytest
from pytest_httpx import HTTPXMock

from cloudbeds_connector.client import CloudbedsClient
from cloudbeds_connector.contracts import (
    ApiError,
    Envelope,
    HttpMethod,
    TransportError,
    ValidationError,
)
from cloudbeds_connector.tests.fixtures import endpoint_url, query_of


class TestRequestBuilding:
    """Headers, query strings and bodies sent to the API"""

    @pytest.mark.asyncio
    async def test_api_key_bearer_header(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(json={"success": True, "data": []})

        await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer test-api-key"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"] == "Cloudbeds-Connector/1.0"

    @pytest.mark.asyncio
    async def test_oauth2_bearer_header(self, httpx_mock: HTTPXMock, oauth2_credentials):
        httpx_mock.add_response(json={"success": True, "data": []})

        async with CloudbedsClient({"credentials": oauth2_credentials}) as client:
            await client.request("GET", "/getHotels")

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer test-access-token"

    @pytest.mark.asyncio
    async def test_url_is_base_plus_endpoint(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(json={"success": True})

        await cloudbeds_client.request(HttpMethod.GET, "/getRoomTypes")

        request = httpx_mock.get_request()
        assert str(request.url) == "https://hotels.cloudbeds.com/api/v1.2/getRoomTypes"

    @pytest.mark.asyncio
    async def test_query_drops_none_and_empty_values(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(json={"success": True, "data": []})

        await cloudbeds_client.request(
            HttpMethod.GET,
            "/getReservations",
            query={
                "propertyID": "PROP01",
                "status": None,
                "guestName": "",
                "pageNumber": 0,
                "includeGuests": False,
            },
        )

        params = query_of(httpx_mock.get_request())
        assert params == {
            "propertyID": "PROP01",
            "pageNumber": "0",
            "includeGuests": "false",
        }

    @pytest.mark.asyncio
    async def test_body_sent_as_json(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(method="POST", json={"success": True, "data": {"guestID": "G1"}})

        body = {"propertyID": "PROP01", "firstName": "Ada", "lastName": "Lovelace"}
        await cloudbeds_client.request(HttpMethod.POST, "/postGuest", body)

        request = httpx_mock.get_request()
        assert request.method == "POST"
        assert json.loads(request.content) == body

    @pytest.mark.asyncio
    async def test_delete_carries_body(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(method="DELETE", json={"success": True})

        await cloudbeds_client.request(
            HttpMethod.DELETE, "/deleteWebhook", {"webhookID": "WH1"}
        )

        request = httpx_mock.get_request()
        assert json.loads(request.content) == {"webhookID": "WH1"}

    @pytest.mark.asyncio
    async def test_lowercase_method_accepted(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(method="PUT", json={"success": True})

        await cloudbeds_client.request("put", "/putGuest", {"guestID": "G1"})

        assert httpx_mock.get_request().method == "PUT"

    @pytest.mark.asyncio
    async def test_date_values_sent_as_iso_dates(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(method="PUT", json={"success": True})

        await cloudbeds_client.request(
            HttpMethod.PUT,
            "/putReservation",
            {"reservationID": "R1", "endDate": date(2024, 1, 2)},
            query={"startDate": date(2024, 1, 1)},
        )

        request = httpx_mock.get_request()
        assert json.loads(request.content) == {"reservationID": "R1", "endDate": "2024-01-02"}
        assert query_of(request) == {"startDate": "2024-01-01"}

    @pytest.mark.asyncio
    async def test_unencodable_body_rejected(self, httpx_mock: HTTPXMock, cloudbeds_client):
        with pytest.raises(ValidationError, match="Request body is not valid JSON"):
            await cloudbeds_client.request(HttpMethod.POST, "/postGuest", {"tags": {1, 2}})

        assert httpx_mock.get_requests() == []

    @pytest.mark.asyncio
    async def test_unsupported_method_rejected(self, cloudbeds_client):
        with pytest.raises(ValidationError, match="Unsupported HTTP method"):
            await cloudbeds_client.request("PATCH", "/putGuest")


class TestEnvelopeMapping:
    """Envelope interpretation and error taxonomy"""

    @pytest.mark.asyncio
    async def test_success_returns_envelope_unchanged(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(
            json={"success": True, "data": [{"id": 1}], "count": 1, "total": 1, "extra": "kept"}
        )

        envelope = await cloudbeds_client.request(HttpMethod.GET, "/getGuests")

        assert isinstance(envelope, Envelope)
        assert envelope.data == [{"id": 1}]
        assert envelope.count == 1
        assert envelope.total == 1
        assert envelope.to_dict()["extra"] == "kept"

    @pytest.mark.asyncio
    async def test_failure_envelope_raises_api_error(
        self, mock_api_error, cloudbeds_client
    ):
        with pytest.raises(ApiError) as exc_info:
            await cloudbeds_client.request(HttpMethod.GET, "/getHotelDetails")

        error = exc_info.value
        assert error.message == "Invalid property ID"
        assert error.description == "Property not found, Check propertyID"
        assert error.status_code == 200

    @pytest.mark.asyncio
    async def test_failure_envelope_defaults(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(json={"success": False})

        with pytest.raises(ApiError) as exc_info:
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

        assert exc_info.value.message == "Unknown API error"
        assert exc_info.value.description == "no additional detail"

    @pytest.mark.asyncio
    async def test_non_string_message_still_api_error(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(json={"success": False, "message": 404, "errors": "Reservation not found"})

        with pytest.raises(ApiError) as exc_info:
            await cloudbeds_client.request(HttpMethod.GET, "/getReservation")

        assert exc_info.value.message == "404"
        assert exc_info.value.description == "Reservation not found"

    @pytest.mark.asyncio
    async def test_missing_success_flag_is_failure(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(json={"data": []})

        with pytest.raises(ApiError):
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

    @pytest.mark.asyncio
    async def test_http_error_with_failure_envelope(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(
            status_code=401,
            json={"success": False, "message": "Unauthorized"},
        )

        with pytest.raises(ApiError) as exc_info:
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

        assert exc_info.value.status_code == 401
        assert exc_info.value.to_dict() == {
            "error": "Unauthorized",
            "description": "no additional detail",
            "status": 401,
        }

    @pytest.mark.asyncio
    async def test_http_error_with_success_envelope(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(status_code=503, json={"success": True})

        with pytest.raises(TransportError, match="HTTP 503"):
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

    @pytest.mark.asyncio
    async def test_non_json_body_is_transport_error(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(status_code=502, text="<html>Bad Gateway</html>")

        with pytest.raises(TransportError) as exc_info:
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_non_object_body_is_transport_error(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(json=[1, 2, 3])

        with pytest.raises(TransportError, match="unexpected response shape"):
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")


class TestTransportFailures:
    """Network level failures"""

    @pytest.mark.asyncio
    async def test_connection_error(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        with pytest.raises(TransportError) as exc_info:
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

        assert "Connection refused" in exc_info.value.message
        assert exc_info.value.description == "Check your credentials and try again"

    @pytest.mark.asyncio
    async def test_timeout(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_exception(httpx.ReadTimeout("Read timed out"))

        with pytest.raises(TransportError, match="timed out"):
            await cloudbeds_client.request(HttpMethod.GET, "/getHotels")

    @pytest.mark.asyncio
    async def test_connects_lazily(self, httpx_mock: HTTPXMock, client_config):
        httpx_mock.add_response(json={"success": True})

        client = CloudbedsClient(client_config)
        try:
            envelope = await client.request(HttpMethod.GET, "/getHotels")
        finally:
            await client.disconnect()

        assert envelope.success is True


class TestHealthCheck:
    @pytest.mark.asyncio
    async def test_healthy(self, mock_get_hotels, cloudbeds_client):
        result = await cloudbeds_client.health_check()

        assert result["status"] == "healthy"
        assert result["vendor"] == "cloudbeds"
        assert result["auth_type"] == "apiKey"
        assert result["properties"] == 2

    @pytest.mark.asyncio
    async def test_unhealthy_on_api_error(self, httpx_mock: HTTPXMock, cloudbeds_client):
        httpx_mock.add_response(
            url=endpoint_url("/getHotels"),
            json={"success": False, "message": "Invalid API key"},
        )

        result = await cloudbeds_client.health_check()

        assert result["status"] == "unhealthy"
        assert result["error"] == "Invalid API key"
