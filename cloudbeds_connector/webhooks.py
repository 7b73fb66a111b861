"""
Cloudbeds Webhook Subscription Manager
Registers, finds and removes event subscriptions, and filters inbound events
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Union

from pydantic import ValidationError as PydanticValidationError

from .client import CloudbedsClient
from .contracts import (
    CloudbedsError,
    HttpMethod,
    TransportError,
    WebhookEvent,
    WebhookSubscription,
)


@dataclass
class WebhookRegistration:
    """Bookkeeping for one trigger's subscription"""

    property_id: str
    webhook_url: str
    event: WebhookEvent
    options: Dict[str, Any] = field(default_factory=dict)
    webhook_id: Optional[str] = None

    def __post_init__(self):
        self.event = WebhookEvent(self.event)


class CloudbedsWebhookManager:
    """Manages Cloudbeds webhook subscriptions through the REST client"""

    def __init__(self, client: CloudbedsClient):
        self.client = client
        self.logger = client.logger

    async def list_subscriptions(self, property_id: str) -> List[WebhookSubscription]:
        """Get all existing webhook subscriptions for a property"""
        envelope = await self.client.request(
            HttpMethod.GET, "/getWebhooks", query={"propertyID": property_id}
        )
        entries = envelope.data if isinstance(envelope.data, list) else []
        try:
            subscriptions = [WebhookSubscription.model_validate(sub) for sub in entries]
        except PydanticValidationError as e:
            raise TransportError(
                "Cloudbeds API request failed: malformed response envelope",
                description=str(e),
            ) from e

        self.logger.info(
            "cloudbeds_webhook_subscriptions_retrieved",
            count=len(subscriptions),
        )
        return subscriptions

    async def check_exists(self, registration: WebhookRegistration) -> bool:
        """Look for a subscription matching url and event; remember its id"""
        try:
            subscriptions = await self.list_subscriptions(registration.property_id)
        except CloudbedsError as e:
            self.logger.error("cloudbeds_webhook_lookup_error", error=e.message)
            return False

        for subscription in subscriptions:
            if (
                subscription.url == registration.webhook_url
                and subscription.event == registration.event.value
            ):
                registration.webhook_id = subscription.webhook_id
                return True

        return False

    async def create(self, registration: WebhookRegistration) -> bool:
        """Create a subscription and remember the returned id"""
        body = {
            "propertyID": registration.property_id,
            "url": registration.webhook_url,
            "event": registration.event.value,
            **registration.options,
        }

        try:
            envelope = await self.client.request(HttpMethod.POST, "/postWebhook", body)
        except CloudbedsError as e:
            self.logger.error("cloudbeds_webhook_subscription_error", error=e.message)
            return False

        data = envelope.data if isinstance(envelope.data, dict) else {}
        webhook_id = data.get("webhookID")
        if not webhook_id:
            self.logger.warning("cloudbeds_webhook_subscription_missing_id")
            return False

        registration.webhook_id = str(webhook_id)
        self.logger.info(
            "cloudbeds_webhook_subscription_created",
            subscription_id=registration.webhook_id,
            endpoint_url=registration.webhook_url,
            event=registration.event.value,
        )
        return True

    async def delete(self, registration: WebhookRegistration) -> bool:
        """Delete the remembered subscription, if any, and forget its id"""
        if registration.webhook_id:
            try:
                await self.client.request(
                    HttpMethod.DELETE,
                    "/deleteWebhook",
                    {"propertyID": registration.property_id, "webhookID": registration.webhook_id},
                )
            except CloudbedsError as e:
                self.logger.error(
                    "cloudbeds_webhook_deletion_error",
                    subscription_id=registration.webhook_id,
                    error=e.message,
                )
                return False

            self.logger.info(
                "cloudbeds_webhook_subscription_deleted",
                subscription_id=registration.webhook_id,
            )

        registration.webhook_id = None
        return True


def filter_event(
    payload: Union[Dict[str, Any], List[Dict[str, Any]]],
    event: Union[WebhookEvent, str],
) -> Optional[List[Dict[str, Any]]]:
    """
    Decide whether an inbound webhook payload should start the workflow.

    Returns the payload as workflow items, or None when the payload names a
    different event than the one subscribed to.
    """
    event = WebhookEvent(event)

    if event is not WebhookEvent.ALL and isinstance(payload, dict):
        received = payload.get("event")
        if received and received != event.value:
            return None

    if isinstance(payload, list):
        return [{"json": item} for item in payload]
    return [{"json": payload}]
