"""
Housekeeping operations: room status and staff assignments
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HousekeepingStatus, HttpMethod
from .base import Handler, Result, choice, list_items, options, require

RESOURCE = "housekeeping"


class HousekeepingOperation(str, Enum):
    GET_STATUS = "getStatus"
    UPDATE_STATUS = "updateStatus"
    GET_ASSIGNMENTS = "getAssignments"
    CREATE_ASSIGNMENT = "createAssignment"


OPERATIONS = HousekeepingOperation


async def get_status(client, params: Dict[str, Any]) -> Result:
    filters = options(params, "filters")
    if filters.get("status"):
        filters["status"] = choice(HousekeepingStatus, filters["status"], "status")
    query = {"propertyID": require(params, "propertyID"), **filters}
    return await list_items(client, "/getHousekeepingStatus", query, params)


async def update_status(client, params: Dict[str, Any]) -> Result:
    body = {
        "propertyID": require(params, "propertyID"),
        "roomID": require(params, "roomID"),
        "status": choice(HousekeepingStatus, require(params, "status"), "status"),
        **options(params, "updateOptions"),
    }
    return await client.request(HttpMethod.PUT, "/putHousekeepingStatus", body)


async def get_assignments(client, params: Dict[str, Any]) -> Result:
    query = {"propertyID": require(params, "propertyID")}
    return await list_items(client, "/getHousekeepingAssignments", query, params)


async def create_assignment(client, params: Dict[str, Any]) -> Result:
    body = {
        "propertyID": require(params, "propertyID"),
        "roomID": require(params, "roomID"),
        "assignedTo": require(params, "assignedTo"),
        **options(params, "assignmentOptions"),
    }
    return await client.request(HttpMethod.POST, "/postHousekeepingAssignment", body)


HANDLERS: Dict[HousekeepingOperation, Handler] = {
    HousekeepingOperation.GET_STATUS: get_status,
    HousekeepingOperation.UPDATE_STATUS: update_status,
    HousekeepingOperation.GET_ASSIGNMENTS: get_assignments,
    HousekeepingOperation.CREATE_ASSIGNMENT: create_assignment,
}
