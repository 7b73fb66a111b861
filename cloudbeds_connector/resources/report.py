"""
Report operations
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HttpMethod
from .base import Handler, Result, date_range, options, require

RESOURCE = "report"


class ReportOperation(str, Enum):
    GET_OCCUPANCY = "getOccupancy"
    GET_REVENUE = "getRevenue"
    GET_ARRIVALS_DEPARTURES = "getArrivalsDepartures"
    GET_CUSTOM_REPORT = "getCustomReport"
    GET_SAVED_REPORTS = "getSavedReports"


OPERATIONS = ReportOperation


def _range_report(endpoint: str) -> Handler:
    async def handler(client, params: Dict[str, Any]) -> Result:
        query = {
            "propertyID": require(params, "propertyID"),
            **date_range(params),
            **options(params, "reportOptions"),
        }
        return await client.request(HttpMethod.GET, endpoint, query=query)

    return handler


async def get_arrivals_departures(client, params: Dict[str, Any]) -> Result:
    query = {
        "propertyID": require(params, "propertyID"),
        "date": require(params, "date"),
        **options(params, "arrivalsDeparturesOptions"),
    }
    return await client.request(HttpMethod.GET, "/getArrivalsDepartures", query=query)


async def get_custom_report(client, params: Dict[str, Any]) -> Result:
    query = {
        "propertyID": require(params, "propertyID"),
        "reportID": require(params, "reportID"),
    }
    return await client.request(HttpMethod.GET, "/getCustomReport", query=query)


async def get_saved_reports(client, params: Dict[str, Any]) -> Result:
    return await client.request(
        HttpMethod.GET,
        "/getSavedReports",
        query={"propertyID": require(params, "propertyID")},
    )


HANDLERS: Dict[ReportOperation, Handler] = {
    ReportOperation.GET_OCCUPANCY: _range_report("/getOccupancyReport"),
    ReportOperation.GET_REVENUE: _range_report("/getRevenueReport"),
    ReportOperation.GET_ARRIVALS_DEPARTURES: get_arrivals_departures,
    ReportOperation.GET_CUSTOM_REPORT: get_custom_report,
    ReportOperation.GET_SAVED_REPORTS: get_saved_reports,
}
