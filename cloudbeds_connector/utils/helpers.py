"""
Date and parameter helpers shared by the resource operations
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from dateutil import parser as date_parser

from ..contracts import ValidationError

DateInput = Union[str, date, datetime]

# Two fill-in values for missing fields; a complete date parses the same under both
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _parse_date(value: DateInput) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        first, second = (date_parser.parse(value, default=d) for d in _DEFAULTS)
        if first != second:
            raise ValueError(f"Incomplete date: {value!r}")
        parsed = first

    # Compare aware and naive values on a common UTC wall clock
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def validate_date_range(start_date: DateInput, end_date: DateInput) -> None:
    """Raise ValidationError unless both dates parse and start <= end"""
    try:
        start = _parse_date(start_date)
    except (ValueError, OverflowError, TypeError):
        raise ValidationError("Invalid start date format. Use YYYY-MM-DD")

    try:
        end = _parse_date(end_date)
    except (ValueError, OverflowError, TypeError):
        raise ValidationError("Invalid end date format. Use YYYY-MM-DD")

    if start > end:
        raise ValidationError("Start date must be before or equal to end date")


def format_date(value: DateInput) -> str:
    """Render a date as YYYY-MM-DD; strings pass through untouched"""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return value.date().isoformat()
    return value.isoformat()


def json_default(value: Any) -> Any:
    """``json.dumps`` hook: dates go out as YYYY-MM-DD, anything else is refused"""
    if isinstance(value, date):
        return format_date(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_query_string(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Drop entries the API treats as absent (None and empty string)"""
    if not params:
        return {}
    return {
        k: format_date(v) if isinstance(v, date) else v
        for k, v in params.items()
        if v is not None and v != ""
    }
