"""
Cloudbeds PMS Connector Package

Async client for the Cloudbeds hospitality PMS REST API:
- a single-call client with envelope/error mapping and pagination
- resource operations (property, reservation, guest, room, calendar,
  transaction, housekeeping, report, channel) dispatched by a registry
- webhook subscription management for event triggers
"""

from .client import CloudbedsClient

from .config import (
    ClientConfig,
    NodeConfig,
    load_config,
    load_config_file,
)

from .contracts import (
    BASE_URL,
    PAGE_SIZE,
    # Errors
    CloudbedsError,
    TransportError,
    ApiError,
    ValidationError,
    # Models
    HttpMethod,
    ApiKeyCredential,
    OAuth2Credential,
    Credential,
    credential_from_config,
    Envelope,
    WebhookEvent,
    WebhookSubscription,
    ReservationStatus,
    HousekeepingStatus,
    TransactionType,
    PaymentMethod,
)

from .factory import (
    CloudbedsNode,
    ResourceDefinition,
    ResourceRegistry,
    get_registry,
)

from .webhooks import (
    CloudbedsWebhookManager,
    WebhookRegistration,
    filter_event,
)

from .utils.helpers import validate_date_range

__version__ = "1.0.0"

__all__ = [
    # Client
    "CloudbedsClient",
    "BASE_URL",
    "PAGE_SIZE",
    # Configuration
    "ClientConfig",
    "NodeConfig",
    "load_config",
    "load_config_file",
    # Errors
    "CloudbedsError",
    "TransportError",
    "ApiError",
    "ValidationError",
    # Models
    "HttpMethod",
    "ApiKeyCredential",
    "OAuth2Credential",
    "Credential",
    "credential_from_config",
    "Envelope",
    "WebhookEvent",
    "WebhookSubscription",
    "ReservationStatus",
    "HousekeepingStatus",
    "TransactionType",
    "PaymentMethod",
    # Registry and executor
    "CloudbedsNode",
    "ResourceDefinition",
    "ResourceRegistry",
    "get_registry",
    # Webhooks
    "CloudbedsWebhookManager",
    "WebhookRegistration",
    "filter_event",
    # Helpers
    "validate_date_range",
]
