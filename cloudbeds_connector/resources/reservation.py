"""
Reservation operations
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HttpMethod, ReservationStatus
from .base import Handler, Result, choice, date_range, list_items, options, require

RESOURCE = "reservation"


class ReservationOperation(str, Enum):
    CREATE = "create"
    GET = "get"
    GET_ALL = "getAll"
    UPDATE = "update"
    CANCEL = "cancel"
    GET_BY_DATES = "getByDates"
    GET_BY_STATUS = "getByStatus"
    ADD_NOTE = "addNote"


OPERATIONS = ReservationOperation


async def create(client, params: Dict[str, Any]) -> Result:
    body = {
        "propertyID": require(params, "propertyID"),
        **date_range(params),
        "roomTypeID": require(params, "roomTypeID"),
        "guestFirstName": require(params, "guestFirstName"),
        "guestLastName": require(params, "guestLastName"),
        **options(params, "additionalFields"),
    }
    return await client.request(HttpMethod.POST, "/postReservation", body)


async def get(client, params: Dict[str, Any]) -> Result:
    return await client.request(
        HttpMethod.GET,
        "/getReservation",
        query={"reservationID": require(params, "reservationID")},
    )


async def get_all(client, params: Dict[str, Any]) -> Result:
    filters = options(params, "filters")
    if filters.get("status"):
        filters["status"] = choice(ReservationStatus, filters["status"], "status")
    query = {"propertyID": require(params, "propertyID"), **filters}
    return await list_items(client, "/getReservations", query, params)


async def update(client, params: Dict[str, Any]) -> Result:
    body = {
        "reservationID": require(params, "reservationID"),
        **options(params, "additionalFields"),
    }
    return await client.request(HttpMethod.PUT, "/putReservation", body)


async def cancel(client, params: Dict[str, Any]) -> Result:
    body = {
        "reservationID": require(params, "reservationID"),
        "status": ReservationStatus.CANCELED.value,
    }
    return await client.request(HttpMethod.PUT, "/putReservation", body)


async def get_by_dates(client, params: Dict[str, Any]) -> Result:
    query = {"propertyID": require(params, "propertyID"), **date_range(params)}
    return await list_items(client, "/getReservationsByDate", query, params)


async def get_by_status(client, params: Dict[str, Any]) -> Result:
    query = {
        "propertyID": require(params, "propertyID"),
        "status": choice(ReservationStatus, require(params, "status"), "status"),
    }
    return await list_items(client, "/getReservations", query, params)


async def add_note(client, params: Dict[str, Any]) -> Result:
    body = {
        "reservationID": require(params, "reservationID"),
        "note": require(params, "note"),
    }
    return await client.request(HttpMethod.POST, "/postReservationNote", body)


HANDLERS: Dict[ReservationOperation, Handler] = {
    ReservationOperation.CREATE: create,
    ReservationOperation.GET: get,
    ReservationOperation.GET_ALL: get_all,
    ReservationOperation.UPDATE: update,
    ReservationOperation.CANCEL: cancel,
    ReservationOperation.GET_BY_DATES: get_by_dates,
    ReservationOperation.GET_BY_STATUS: get_by_status,
    ReservationOperation.ADD_NOTE: add_note,
}
