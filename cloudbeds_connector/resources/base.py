"""
Shared plumbing for resource handlers
"""

from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Type, TypeVar, Union, TYPE_CHECKING

from ..contracts import Envelope, HttpMethod, ValidationError
from ..utils.helpers import format_date, validate_date_range

if TYPE_CHECKING:
    from ..client import CloudbedsClient

Result = Union[Envelope, Dict[str, Any]]
Handler = Callable[["CloudbedsClient", Dict[str, Any]], Awaitable[Result]]

E = TypeVar("E", bound=Enum)

DEFAULT_LIMIT = 50


def require(params: Dict[str, Any], name: str) -> Any:
    """Fetch a required parameter; None and "" count as missing"""
    value = params.get(name)
    if value is None or value == "":
        raise ValidationError(f"Missing required parameter: {name}")
    return value


def options(params: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Fetch an optional parameter collection (additionalFields, filters, ...)"""
    value = params.get(name) or {}
    if not isinstance(value, dict):
        raise ValidationError(f"Parameter {name} must be a mapping")
    return dict(value)


def choice(enum_cls: Type[E], value: Any, name: str) -> str:
    """Check an option value against its enum and return the wire value"""
    try:
        return enum_cls(value).value
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid value for {name}: {value!r}. Expected one of: {allowed}")


def date_range(params: Dict[str, Any]) -> Dict[str, Any]:
    """Required startDate/endDate, validated before any request goes out"""
    start_date = require(params, "startDate")
    end_date = require(params, "endDate")
    validate_date_range(start_date, end_date)
    return {"startDate": format_date(start_date), "endDate": format_date(end_date)}


async def list_items(
    client: "CloudbedsClient",
    endpoint: str,
    query: Dict[str, Any],
    params: Dict[str, Any],
) -> Result:
    """
    Run a listing request honouring returnAll/limit.

    returnAll paginates through every page and wraps the items as
    ``{"data": [...]}``; otherwise a single page of ``limit`` items is fetched.
    """
    if params.get("returnAll"):
        data = await client.request_all_items(HttpMethod.GET, endpoint, query=query)
        return {"data": data}

    limit = params.get("limit") or DEFAULT_LIMIT
    return await client.request(HttpMethod.GET, endpoint, query={**query, "pageSize": limit})
