"""
Calendar operations: availability, rates and restrictions over a date range
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HttpMethod
from ..utils.helpers import build_query_string
from .base import Handler, Result, date_range, options, require

RESOURCE = "calendar"


class CalendarOperation(str, Enum):
    GET_CALENDAR = "getCalendar"
    UPDATE_CALENDAR = "updateCalendar"
    GET_RATES = "getRates"
    UPDATE_RATES = "updateRates"
    GET_RESTRICTIONS = "getRestrictions"
    UPDATE_RESTRICTIONS = "updateRestrictions"


OPERATIONS = CalendarOperation


def _scope(params: Dict[str, Any]) -> Dict[str, Any]:
    # Every calendar operation is scoped to a property and a date range
    return {"propertyID": require(params, "propertyID"), **date_range(params)}


async def get_calendar(client, params: Dict[str, Any]) -> Result:
    query = {
        **_scope(params),
        "roomTypeID": params.get("roomTypeID"),
        **options(params, "calendarOptions"),
    }
    return await client.request(HttpMethod.GET, "/getCalendar", query=query)


async def update_calendar(client, params: Dict[str, Any]) -> Result:
    body = {
        **_scope(params),
        "roomTypeID": require(params, "roomTypeID"),
        "availableRooms": require(params, "availableRooms"),
    }
    return await client.request(HttpMethod.PUT, "/putCalendar", body)


def _rate_lookup(endpoint: str) -> Handler:
    async def handler(client, params: Dict[str, Any]) -> Result:
        query = {
            **_scope(params),
            "roomTypeID": params.get("roomTypeID"),
            "ratePlanID": params.get("ratePlanID"),
        }
        return await client.request(HttpMethod.GET, endpoint, query=query)

    return handler


async def update_rates(client, params: Dict[str, Any]) -> Result:
    body = {
        **_scope(params),
        "roomTypeID": require(params, "roomTypeID"),
        "ratePlanID": require(params, "ratePlanID"),
        "rate": require(params, "rate"),
    }
    return await client.request(HttpMethod.PUT, "/putRates", body)


async def update_restrictions(client, params: Dict[str, Any]) -> Result:
    body = build_query_string({
        **_scope(params),
        "roomTypeID": require(params, "roomTypeID"),
        "ratePlanID": params.get("ratePlanID"),
        **options(params, "restrictionOptions"),
    })
    return await client.request(HttpMethod.PUT, "/putRestrictions", body)


HANDLERS: Dict[CalendarOperation, Handler] = {
    CalendarOperation.GET_CALENDAR: get_calendar,
    CalendarOperation.UPDATE_CALENDAR: update_calendar,
    CalendarOperation.GET_RATES: _rate_lookup("/getRates"),
    CalendarOperation.UPDATE_RATES: update_rates,
    CalendarOperation.GET_RESTRICTIONS: _rate_lookup("/getRestrictions"),
    CalendarOperation.UPDATE_RESTRICTIONS: update_restrictions,
}
