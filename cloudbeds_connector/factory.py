"""
Cloudbeds Resource Registry and Node Executor
Operation lookup by (resource, operation) and batch execution of input items
"""

import logging
import importlib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Type, Optional, List, Any, Union

from .client import CloudbedsClient
from .config import NodeConfig
from .contracts import CloudbedsError, Envelope, ValidationError
from .resources.base import Handler

logger = logging.getLogger(__name__)

LICENSING_NOTICE = (
    "[Cloudbeds Connector Licensing Notice] "
    "This connector is licensed under the Business Source License 1.1 (BSL 1.1). "
    "Use by for-profit organizations in production environments requires a commercial license."
)


@dataclass
class ResourceDefinition:
    """An operation enum and its handlers for one business resource"""

    name: str
    operations: Type[Enum]
    handlers: Dict[Enum, Handler]


class ResourceRegistry:
    """Registry of resource modules and their operation handlers"""

    def __init__(self, discover: bool = True):
        self._resources: Dict[str, ResourceDefinition] = {}
        if discover:
            self._discover_resources()

    def _discover_resources(self):
        """Automatically discover and register resources from the resources package"""
        resources_path = Path(__file__).parent / "resources"

        for module_path in sorted(resources_path.glob("*.py")):
            if module_path.stem.startswith("_") or module_path.stem == "base":
                continue

            module_name = f"{__package__}.resources.{module_path.stem}"
            module = importlib.import_module(module_name)

            resource = getattr(module, "RESOURCE", None)
            if resource is None:
                continue

            self.register(resource, module.OPERATIONS, module.HANDLERS)
            logger.debug(f"Discovered resource: {resource} ({module_name})")

    def register(self, name: str, operations: Type[Enum], handlers: Dict[Enum, Handler]):
        """Register a resource; every operation must have a handler"""
        missing = [op.value for op in operations if op not in handlers]
        if missing:
            raise ValueError(f"Resource {name} has operations without handlers: {missing}")

        self._resources[name] = ResourceDefinition(name, operations, dict(handlers))

    def get_resource(self, name: str) -> ResourceDefinition:
        if name not in self._resources:
            raise ValidationError(f"Unknown resource: {name}")
        return self._resources[name]

    def list_resources(self) -> List[str]:
        return list(self._resources.keys())

    def list_operations(self, resource: str) -> List[str]:
        return [op.value for op in self.get_resource(resource).operations]

    def get_handler(self, resource: str, operation: Union[str, Enum]) -> Handler:
        """Resolve the handler for an operation name within a resource"""
        definition = self.get_resource(resource)
        try:
            op = definition.operations(operation)
        except ValueError:
            raise ValidationError(f"Unknown operation: {operation}")
        return definition.handlers[op]


# Global registry instance
_registry: Optional[ResourceRegistry] = None


def get_registry() -> ResourceRegistry:
    global _registry
    if _registry is None:
        _registry = ResourceRegistry()
    return _registry


class CloudbedsNode:
    """
    Runs input items against one resource.

    Each input item is the resolved parameter mapping for that item and must
    carry its ``operation``. Responses become output items of the form
    ``{"json": ...}``; list payloads fan out into one item per element.
    """

    def __init__(
        self,
        client: CloudbedsClient,
        config: Optional[NodeConfig] = None,
        registry: Optional[ResourceRegistry] = None,
    ):
        self.client = client
        self.config = config or NodeConfig()
        self.registry = registry or get_registry()
        self._notice_logged = not self.config.log_licensing_notice

    def _log_licensing_notice(self):
        if not self._notice_logged:
            logger.warning(LICENSING_NOTICE)
            self._notice_logged = True

    async def execute(self, resource: str, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Execute every item and collect the output items"""
        self._log_licensing_notice()
        self.registry.get_resource(resource)

        return_data: List[Dict[str, Any]] = []

        for i, params in enumerate(items):
            try:
                handler = self.registry.get_handler(resource, params.get("operation"))
                response = await handler(self.client, params)
                return_data.extend(self._to_items(response))
            except CloudbedsError as e:
                if self.config.continue_on_fail:
                    logger.warning(f"Item {i} failed for {resource}: {e.message}")
                    return_data.append({"json": {"error": e.message}, "pairedItem": {"item": i}})
                    continue
                raise

        return return_data

    @staticmethod
    def _to_items(response: Union[Envelope, Dict[str, Any]]) -> List[Dict[str, Any]]:
        if isinstance(response, Envelope):
            data = response.data if response.data is not None else response.to_dict()
        else:
            data = response.get("data")
            if data is None:
                data = response

        if isinstance(data, list):
            return [{"json": item} for item in data]
        return [{"json": data}]
