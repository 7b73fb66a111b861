"""
Cloudbeds PMS Connector Contracts
Credentials, response envelope, webhook and option types shared by every caller
"""

from typing import Optional, List, Dict, Any, Mapping, Union
from enum import Enum
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator


BASE_URL = "https://hotels.cloudbeds.com/api/v1.2"
PAGE_SIZE = 100


# Error types
class CloudbedsError(Exception):
    """Base exception for Cloudbeds operations"""

    def __init__(self, message: str, description: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.description = description

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"error": self.message}
        if self.description:
            result["description"] = self.description
        return result


class TransportError(CloudbedsError):
    """Connection failure, timeout or unparseable response"""

    def __init__(
        self,
        message: str,
        description: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, description)
        self.status_code = status_code


class ApiError(CloudbedsError):
    """Well-formed envelope reporting success: false"""

    def __init__(
        self,
        message: str,
        description: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, description)
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.status_code:
            result["status"] = self.status_code
        return result


class ValidationError(CloudbedsError):
    """Caller-side precondition failure, raised before any network call"""

    pass


# Request model
class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# Credentials
@dataclass(frozen=True)
class ApiKeyCredential:
    key: str

    auth_type = "apiKey"

    @property
    def bearer_token(self) -> str:
        return self.key


@dataclass(frozen=True)
class OAuth2Credential:
    client_id: str
    client_secret: str
    access_token: str
    refresh_token: str = ""  # stored for the host, never exchanged here

    auth_type = "oauth2"

    @property
    def bearer_token(self) -> str:
        return self.access_token


Credential = Union[ApiKeyCredential, OAuth2Credential]


def credential_from_config(config: Mapping[str, Any]) -> Credential:
    """
    Build a typed credential from the host's credential record.

    Accepts the camelCase keys the host stores
    (``authType``, ``apiKey``, ``clientId``, ``clientSecret``,
    ``accessToken``, ``refreshToken``).
    """
    if isinstance(config, (ApiKeyCredential, OAuth2Credential)):
        return config

    auth_type = config.get("authType") or "apiKey"

    if auth_type == "apiKey":
        return ApiKeyCredential(key=config.get("apiKey") or "")
    if auth_type == "oauth2":
        return OAuth2Credential(
            client_id=config.get("clientId") or "",
            client_secret=config.get("clientSecret") or "",
            access_token=config.get("accessToken") or "",
            refresh_token=config.get("refreshToken") or "",
        )

    raise ValidationError(f"Unsupported authentication type: {auth_type}")


# Response envelope
class Envelope(BaseModel):
    """Uniform response wrapper returned by every Cloudbeds endpoint"""

    model_config = ConfigDict(extra="allow")

    success: bool = False
    data: Any = None
    count: Optional[int] = None
    total: Optional[int] = None
    message: Optional[str] = None
    errors: Optional[List[Any]] = None

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("errors", mode="before")
    @classmethod
    def coerce_errors(cls, v: Any) -> Optional[List[Any]]:
        if v is None or isinstance(v, list):
            return v
        return [v]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# Webhooks
class WebhookEvent(str, Enum):
    """Events a trigger can subscribe to"""

    RESERVATION_CREATED = "reservation_created"
    RESERVATION_MODIFIED = "reservation_modified"
    RESERVATION_CANCELED = "reservation_canceled"
    GUEST_CHECKED_IN = "guest_checked_in"
    GUEST_CHECKED_OUT = "guest_checked_out"
    PAYMENT_RECEIVED = "payment_received"
    HOUSEKEEPING_STATUS_CHANGED = "housekeeping_status_changed"
    ROOM_BLOCKED = "room_blocked"
    RATE_UPDATED = "rate_updated"
    ALL = "all"


class WebhookSubscription(BaseModel):
    """Webhook subscription as listed by /getWebhooks"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    webhook_id: str = Field(..., alias="webhookID", description="Subscription ID")
    url: str = Field(..., description="Webhook endpoint URL")
    event: str = Field(..., description="Subscribed event")

    @field_validator("webhook_id", mode="before")
    @classmethod
    def coerce_webhook_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v


# Option values accepted by the API
class ReservationStatus(str, Enum):
    CONFIRMED = "confirmed"
    NOT_CONFIRMED = "not_confirmed"
    CANCELED = "canceled"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    NO_SHOW = "no_show"


class HousekeepingStatus(str, Enum):
    CLEAN = "clean"
    DIRTY = "dirty"
    INSPECTED = "inspected"
    OUT_OF_SERVICE = "out_of_service"
    OUT_OF_ORDER = "out_of_order"


class TransactionType(str, Enum):
    CHARGE = "charge"
    PAYMENT = "payment"
    REFUND = "refund"
    ADJUSTMENT = "adjustment"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"
    CHECK = "check"
    OTHER = "other"
