"""
Cloudbeds REST Client
Single-call request/envelope mapping plus page-number pagination
"""

from typing import Optional, List, Dict, Any, Mapping, Union
from datetime import datetime, timezone
import json
import time

import httpx

from .config import ClientConfig, load_config
from .contracts import (
    PAGE_SIZE,
    ApiError,
    Envelope,
    HttpMethod,
    TransportError,
    ValidationError,
)
from .utils.helpers import build_query_string, json_default
from .utils.logging import ConnectorLogger, log_performance, sanitize_url

DEFAULT_API_ERROR = "Unknown API error"
DEFAULT_API_ERROR_DETAIL = "no additional detail"


class CloudbedsClient:
    """
    Async client for the Cloudbeds PMS API

    Handles:
    - Bearer authentication from an API key or OAuth2 access token
    - Query sanitation and JSON bodies
    - Envelope interpretation and error mapping
    - Page-number pagination for listing endpoints
    """

    vendor_name = "cloudbeds"

    def __init__(self, config: Union[ClientConfig, Dict[str, Any]]):
        self.config = config if isinstance(config, ClientConfig) else load_config(config)
        self.base_url = self.config.base_url
        self.credential = self.config.credential
        self._client: Optional[httpx.AsyncClient] = None

        self.logger = ConnectorLogger(
            name=f"{self.__class__.__module__}.{self.__class__.__name__}",
            vendor=self.vendor_name,
            property_id=self.config.property_id,
        )

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    async def connect(self):
        """Open the pooled HTTP client"""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.config.timeout),
            limits=httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0,
            ),
            headers={"User-Agent": self.config.user_agent},
            http2=True,
        )
        self.logger.info(
            "cloudbeds_client_connected",
            base_url=self.base_url,
            auth_type=self.credential.auth_type,
        )

    async def disconnect(self):
        """Clean up connection"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.credential.bearer_token}",
        }

    async def request(
        self,
        method: Union[HttpMethod, str],
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Envelope:
        """
        Perform one API call and interpret its envelope.

        Args:
            method: HTTP method
            endpoint: Path relative to the base URL (e.g. /getReservations)
            body: JSON body, sent for any method when given
            query: Query parameters; None and "" values are dropped
            timeout: Per-request timeout override in seconds

        Returns:
            The successful envelope, unchanged

        Raises:
            TransportError: Connection failure, timeout or unparseable body
            ApiError: Envelope reported success: false
            ValidationError: Unsupported method or a body that cannot be encoded
        """
        method = self._normalize_method(method)
        await self.connect()

        operation = f"{method} {endpoint}"
        params = build_query_string(query)
        kwargs: Dict[str, Any] = {"headers": self._headers(), "params": params}
        if body is not None:
            kwargs["content"] = self._encode_body(body)
        if timeout is not None:
            kwargs["timeout"] = timeout

        start_time = time.perf_counter()

        def _elapsed_ms() -> float:
            return (time.perf_counter() - start_time) * 1000

        try:
            response = await self._client.request(method, endpoint, **kwargs)
        except httpx.TimeoutException as e:
            error = TransportError(
                f"Cloudbeds API request failed: request timed out ({e})",
                description="The request exceeded its timeout",
            )
            self.logger.log_api_call(operation=operation, duration_ms=_elapsed_ms(), error=error)
            raise error from e
        except httpx.RequestError as e:
            error = TransportError(
                f"Cloudbeds API request failed: {e}",
                description="Check your credentials and try again",
            )
            self.logger.log_api_call(operation=operation, duration_ms=_elapsed_ms(), error=error)
            raise error from e

        url = sanitize_url(str(response.request.url))
        envelope = self._parse_envelope(response)

        if not envelope.success:
            error = ApiError(
                envelope.message or DEFAULT_API_ERROR,
                description=", ".join(str(e) for e in envelope.errors or []) or DEFAULT_API_ERROR_DETAIL,
                status_code=response.status_code,
            )
            self.logger.log_api_call(
                operation=operation,
                status_code=response.status_code,
                duration_ms=_elapsed_ms(),
                error=error,
                url=url,
            )
            raise error

        if not response.is_success:
            error = TransportError(
                f"Cloudbeds API request failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )
            self.logger.log_api_call(
                operation=operation,
                status_code=response.status_code,
                duration_ms=_elapsed_ms(),
                error=error,
                url=url,
            )
            raise error

        self.logger.log_api_call(
            operation=operation,
            status_code=response.status_code,
            duration_ms=_elapsed_ms(),
            url=url,
        )
        return envelope

    @staticmethod
    def _normalize_method(method: Union[HttpMethod, str]) -> str:
        if isinstance(method, HttpMethod):
            return method.value
        try:
            return HttpMethod(method.upper()).value
        except (ValueError, AttributeError):
            raise ValidationError(f"Unsupported HTTP method: {method}")

    @staticmethod
    def _encode_body(body: Mapping[str, Any]) -> bytes:
        try:
            return json.dumps(dict(body), default=json_default).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Request body is not valid JSON: {e}")

    def _parse_envelope(self, response: httpx.Response) -> Envelope:
        """Decode the body into an Envelope or raise TransportError"""
        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                f"Cloudbeds API request failed: invalid JSON response (HTTP {response.status_code})",
                description=str(e),
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"Cloudbeds API request failed: unexpected response shape (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        try:
            return Envelope.model_validate(payload)
        except ValueError as e:
            raise TransportError(
                "Cloudbeds API request failed: malformed response envelope",
                description=str(e),
                status_code=response.status_code,
            ) from e

    async def request_all_items(
        self,
        method: Union[HttpMethod, str],
        endpoint: str,
        body: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> List[Any]:
        """
        Fetch every item of a listing endpoint, page by page.

        Pages are requested sequentially starting at pageNumber 0 with a
        fixed page size. A full page with no reported total keeps the loop
        going until a short page arrives, unless ``max_pages`` is configured.
        """
        items: List[Any] = []
        page_number = 0
        max_pages = self.config.max_pages

        while True:
            envelope = await self.request(
                method,
                endpoint,
                body,
                {**(query or {}), "pageNumber": page_number, "pageSize": PAGE_SIZE},
            )
            data = envelope.data
            page_number += 1

            if isinstance(data, list):
                items.extend(data)
            elif data is not None:
                # Non-list endpoints return a single object: one page only
                items.append(data)
                break

            if not (
                isinstance(data, list)
                and len(data) == PAGE_SIZE
                and (envelope.total is None or len(items) < envelope.total)
            ):
                break

            if max_pages is not None and page_number >= max_pages:
                self.logger.warning(
                    "cloudbeds_pagination_page_limit_reached",
                    endpoint=endpoint,
                    max_pages=max_pages,
                    items=len(items),
                )
                break

        return items

    @log_performance("health_check")
    async def health_check(self) -> Dict[str, Any]:
        """Check API reachability and credentials with /getHotels"""
        try:
            envelope = await self.request(HttpMethod.GET, "/getHotels")
            return {
                "status": "healthy",
                "vendor": self.vendor_name,
                "auth_type": self.credential.auth_type,
                "properties": len(envelope.data) if isinstance(envelope.data, list) else 1,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        except (ApiError, TransportError) as e:
            return {
                "status": "unhealthy",
                "vendor": self.vendor_name,
                "auth_type": self.credential.auth_type,
                "error": e.message,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
