"""
Property operations: hotels, room types, rooms, rate plans and amenities
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HttpMethod
from .base import Handler, Result, require

RESOURCE = "property"


class PropertyOperation(str, Enum):
    GET_HOTELS = "getHotels"
    GET_HOTEL_DETAILS = "getHotelDetails"
    GET_ROOM_TYPES = "getRoomTypes"
    GET_ROOMS = "getRooms"
    GET_RATE_PLANS = "getRatePlans"
    GET_AMENITIES = "getAmenities"


OPERATIONS = PropertyOperation


async def get_hotels(client, params: Dict[str, Any]) -> Result:
    return await client.request(HttpMethod.GET, "/getHotels")


def _property_lookup(endpoint: str) -> Handler:
    async def handler(client, params: Dict[str, Any]) -> Result:
        return await client.request(
            HttpMethod.GET, endpoint, query={"propertyID": require(params, "propertyID")}
        )

    return handler


HANDLERS: Dict[PropertyOperation, Handler] = {
    PropertyOperation.GET_HOTELS: get_hotels,
    PropertyOperation.GET_HOTEL_DETAILS: _property_lookup("/getHotelDetails"),
    PropertyOperation.GET_ROOM_TYPES: _property_lookup("/getRoomTypes"),
    PropertyOperation.GET_ROOMS: _property_lookup("/getRooms"),
    PropertyOperation.GET_RATE_PLANS: _property_lookup("/getRatePlans"),
    PropertyOperation.GET_AMENITIES: _property_lookup("/getAmenities"),
}
