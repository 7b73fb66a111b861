"""
Utility modules for the Cloudbeds connector
"""

from .helpers import (
    build_query_string,
    format_date,
    json_default,
    validate_date_range,
)

from .logging import (
    ConnectorLogger,
    SensitiveDataFilter,
    StructuredFormatter,
    log_performance,
    sanitize_url,
    correlation_id
)

__all__ = [
    # Helpers
    "build_query_string",
    "format_date",
    "json_default",
    "validate_date_range",
    # Logging
    "ConnectorLogger",
    "SensitiveDataFilter",
    "StructuredFormatter",
    "log_performance",
    "sanitize_url",
    "correlation_id",
]
