"""
Guest operations
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HttpMethod
from .base import Handler, Result, list_items, options, require

RESOURCE = "guest"


class GuestOperation(str, Enum):
    CREATE = "create"
    GET = "get"
    GET_ALL = "getAll"
    UPDATE = "update"
    SEARCH = "search"
    GET_BY_RESERVATION = "getByReservation"


OPERATIONS = GuestOperation


async def create(client, params: Dict[str, Any]) -> Result:
    body = {
        "propertyID": require(params, "propertyID"),
        "firstName": require(params, "firstName"),
        "lastName": require(params, "lastName"),
        **options(params, "additionalFields"),
    }
    return await client.request(HttpMethod.POST, "/postGuest", body)


async def get(client, params: Dict[str, Any]) -> Result:
    return await client.request(
        HttpMethod.GET, "/getGuest", query={"guestID": require(params, "guestID")}
    )


async def get_all(client, params: Dict[str, Any]) -> Result:
    query = {"propertyID": require(params, "propertyID"), **options(params, "filters")}
    return await list_items(client, "/getGuests", query, params)


async def update(client, params: Dict[str, Any]) -> Result:
    body = {"guestID": require(params, "guestID"), **options(params, "additionalFields")}
    return await client.request(HttpMethod.PUT, "/putGuest", body)


async def search(client, params: Dict[str, Any]) -> Result:
    query = {
        "propertyID": require(params, "propertyID"),
        "searchQuery": require(params, "searchQuery"),
    }
    return await list_items(client, "/getGuestSearch", query, params)


async def get_by_reservation(client, params: Dict[str, Any]) -> Result:
    return await client.request(
        HttpMethod.GET,
        "/getReservationGuests",
        query={"reservationID": require(params, "reservationID")},
    )


HANDLERS: Dict[GuestOperation, Handler] = {
    GuestOperation.CREATE: create,
    GuestOperation.GET: get,
    GuestOperation.GET_ALL: get_all,
    GuestOperation.UPDATE: update,
    GuestOperation.SEARCH: search,
    GuestOperation.GET_BY_RESERVATION: get_by_reservation,
}
