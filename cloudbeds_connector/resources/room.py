"""
Room operations: listing, availability, assignment, blocks and housekeeping
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HousekeepingStatus, HttpMethod
from .base import Handler, Result, choice, date_range, list_items, options, require

RESOURCE = "room"


class RoomOperation(str, Enum):
    GET_ALL = "getAll"
    GET_AVAILABILITY = "getAvailability"
    ASSIGN_ROOM = "assignRoom"
    UNASSIGN_ROOM = "unassignRoom"
    SET_BLOCKED = "setBlocked"
    REMOVE_BLOCKED = "removeBlocked"
    SET_OUT_OF_SERVICE = "setOutOfService"
    GET_HOUSEKEEPING = "getHousekeeping"
    UPDATE_HOUSEKEEPING = "updateHousekeeping"


OPERATIONS = RoomOperation


async def get_all(client, params: Dict[str, Any]) -> Result:
    query = {
        "propertyID": require(params, "propertyID"),
        **options(params, "additionalOptions"),
    }
    return await list_items(client, "/getRooms", query, params)


async def get_availability(client, params: Dict[str, Any]) -> Result:
    query = {
        "propertyID": require(params, "propertyID"),
        **date_range(params),
        **options(params, "additionalOptions"),
    }
    return await client.request(HttpMethod.GET, "/getAvailableRoomTypes", query=query)


def _assignment(endpoint: str) -> Handler:
    async def handler(client, params: Dict[str, Any]) -> Result:
        body = {
            "roomID": require(params, "roomID"),
            "reservationID": require(params, "reservationID"),
        }
        return await client.request(HttpMethod.POST, endpoint, body)

    return handler


def _block(endpoint: str) -> Handler:
    async def handler(client, params: Dict[str, Any]) -> Result:
        body = {
            "propertyID": require(params, "propertyID"),
            "roomID": require(params, "roomID"),
            **date_range(params),
            **options(params, "blockOptions"),
        }
        return await client.request(HttpMethod.POST, endpoint, body)

    return handler


async def remove_blocked(client, params: Dict[str, Any]) -> Result:
    body = {
        "propertyID": require(params, "propertyID"),
        "roomID": require(params, "roomID"),
    }
    return await client.request(HttpMethod.DELETE, "/deleteRoomBlock", body)


async def get_housekeeping(client, params: Dict[str, Any]) -> Result:
    return await client.request(
        HttpMethod.GET,
        "/getHousekeepingStatus",
        query={"propertyID": require(params, "propertyID")},
    )


async def update_housekeeping(client, params: Dict[str, Any]) -> Result:
    body = {
        "roomID": require(params, "roomID"),
        "status": choice(HousekeepingStatus, require(params, "status"), "status"),
    }
    return await client.request(HttpMethod.PUT, "/putHousekeepingStatus", body)


HANDLERS: Dict[RoomOperation, Handler] = {
    RoomOperation.GET_ALL: get_all,
    RoomOperation.GET_AVAILABILITY: get_availability,
    RoomOperation.ASSIGN_ROOM: _assignment("/postRoomAssign"),
    RoomOperation.UNASSIGN_ROOM: _assignment("/postRoomUnassign"),
    RoomOperation.SET_BLOCKED: _block("/postRoomBlock"),
    RoomOperation.REMOVE_BLOCKED: remove_blocked,
    RoomOperation.SET_OUT_OF_SERVICE: _block("/postRoomOutOfService"),
    RoomOperation.GET_HOUSEKEEPING: get_housekeeping,
    RoomOperation.UPDATE_HOUSEKEEPING: update_housekeeping,
}
