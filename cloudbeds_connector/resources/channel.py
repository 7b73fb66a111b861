"""
Channel manager operations: OTA connections, mappings and sync
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HttpMethod
from .base import Handler, Result, date_range, list_items, options, require

RESOURCE = "channel"


class ChannelOperation(str, Enum):
    GET_CONNECTIONS = "getConnections"
    GET_RATE_MAPPINGS = "getRateMappings"
    GET_INVENTORY_MAPPINGS = "getInventoryMappings"
    SYNC_AVAILABILITY = "syncAvailability"
    SYNC_RATES = "syncRates"


OPERATIONS = ChannelOperation


async def get_connections(client, params: Dict[str, Any]) -> Result:
    query = {
        "propertyID": require(params, "propertyID"),
        **options(params, "connectionFilters"),
    }
    return await list_items(client, "/getChannelConnections", query, params)


def _mapping_lookup(endpoint: str) -> Handler:
    async def handler(client, params: Dict[str, Any]) -> Result:
        query = {
            "propertyID": require(params, "propertyID"),
            "channelID": require(params, "channelID"),
            "mappingID": params.get("mappingID"),
        }
        return await list_items(client, endpoint, query, params)

    return handler


def _sync(endpoint: str) -> Handler:
    async def handler(client, params: Dict[str, Any]) -> Result:
        body = {
            "propertyID": require(params, "propertyID"),
            "channelID": require(params, "channelID"),
            **date_range(params),
            **options(params, "syncOptions"),
        }
        return await client.request(HttpMethod.POST, endpoint, body)

    return handler


HANDLERS: Dict[ChannelOperation, Handler] = {
    ChannelOperation.GET_CONNECTIONS: get_connections,
    ChannelOperation.GET_RATE_MAPPINGS: _mapping_lookup("/getChannelRateMappings"),
    ChannelOperation.GET_INVENTORY_MAPPINGS: _mapping_lookup("/getChannelInventoryMappings"),
    ChannelOperation.SYNC_AVAILABILITY: _sync("/postChannelAvailabilitySync"),
    ChannelOperation.SYNC_RATES: _sync("/postChannelRatesSync"),
}
