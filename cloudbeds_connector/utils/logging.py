"""
Secure Logging Utilities for the Cloudbeds Connector
Provides structured logging with credential masking and correlation IDs
"""

import logging
import json
import re
import socket
import time
import uuid
from typing import Dict, Any, Optional
from contextvars import ContextVar
from functools import wraps
from datetime import datetime, timezone
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse

# Context variable for correlation ID
correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

SENSITIVE_KEYS = {
    'api_key', 'apikey', 'key', 'token', 'secret',
    'password', 'pwd', 'auth', 'authorization',
    'client_secret', 'clientsecret', 'access_token', 'accesstoken',
    'refresh_token', 'refreshtoken', 'session', 'sid',
}

BEARER_PATTERN = re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/]+=*", re.IGNORECASE)

REDACTED = "<REDACTED>"

_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'created', 'msecs', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'exc_info', 'exc_text',
    'stack_info', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'getMessage', 'taskName', 'message',
}


def redact_value(key: str, value: Any) -> Any:
    """Mask a value when its key names a secret"""
    if key.lower() in SENSITIVE_KEYS:
        return REDACTED
    if isinstance(value, dict):
        return {k: redact_value(k, v) for k, v in value.items()}
    if isinstance(value, str):
        return BEARER_PATTERN.sub(rf"\1{REDACTED}", value)
    return value


class SensitiveDataFilter(logging.Filter):
    """Masks bearer tokens and credential fields before records are emitted"""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = BEARER_PATTERN.sub(rf"\1{REDACTED}", record.msg)

        for key, value in list(record.__dict__.items()):
            if key in _RESERVED_ATTRS:
                continue
            record.__dict__[key] = redact_value(key, value)

        return True


class StructuredFormatter(logging.Formatter):
    """
    Structured JSON formatter for logs

    Outputs logs in JSON format for better observability
    """

    def __init__(self, service_name: str = "cloudbeds-connector"):
        super().__init__()
        self.service_name = service_name
        self.hostname = self._get_hostname()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON with standard fields"""
        log_obj = {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "hostname": self.hostname,
            "correlation_id": correlation_id.get(),
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_obj:
                log_obj[key] = value

        return json.dumps(log_obj, default=str)

    @staticmethod
    def _get_hostname():
        try:
            return socket.gethostname()
        except OSError:
            return "unknown"


class ConnectorLogger:
    """
    Logger for the Cloudbeds connector with built-in masking and observability

    Features:
    - Credential and bearer token masking
    - Correlation ID tracking
    - Request timing
    - Structured logging
    """

    def __init__(self, name: str, vendor: str = "cloudbeds", property_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.vendor = vendor
        self.property_id = property_id

        if not any(isinstance(f, SensitiveDataFilter) for f in self.logger.filters):
            self.logger.addFilter(SensitiveDataFilter())

        # Set up structured logging if not already configured
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def _context(self, **kwargs) -> Dict[str, Any]:
        return {"vendor": self.vendor, "property_id": self.property_id, **kwargs}

    def with_correlation_id(self, correlation_id_val: Optional[str] = None) -> str:
        """Set or generate correlation ID for request tracking"""
        correlation_id.set(correlation_id_val or str(uuid.uuid4()))
        return correlation_id.get()

    def log_api_call(self,
                     operation: str,
                     duration_ms: Optional[float] = None,
                     status_code: Optional[int] = None,
                     error: Optional[Exception] = None,
                     **kwargs):
        """Log API call with standardized fields"""
        log_data = self._context(
            operation=operation,
            duration_ms=duration_ms,
            status_code=status_code,
            **kwargs,
        )

        if error:
            log_data["error"] = str(error)
            log_data["error_type"] = type(error).__name__
            self.logger.error(f"API call failed: {operation}", extra=log_data)
        else:
            self.logger.info(f"API call completed: {operation}", extra=log_data)

    def debug(self, msg: str, **kwargs):
        self.logger.debug(msg, extra=self._context(**kwargs))

    def info(self, msg: str, **kwargs):
        self.logger.info(msg, extra=self._context(**kwargs))

    def warning(self, msg: str, **kwargs):
        self.logger.warning(msg, extra=self._context(**kwargs))

    def error(self, msg: str, exc_info=None, **kwargs):
        self.logger.error(msg, exc_info=exc_info, extra=self._context(**kwargs))


def log_performance(operation: str):
    """
    Decorator to log performance metrics for async functions

    Usage:
        @log_performance("health_check")
        async def health_check(self, ...):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            start_time = time.perf_counter()
            error = None

            try:
                return await func(self, *args, **kwargs)
            except Exception as e:
                error = e
                raise
            finally:
                duration_ms = (time.perf_counter() - start_time) * 1000
                if isinstance(getattr(self, "logger", None), ConnectorLogger):
                    self.logger.log_api_call(
                        operation=operation,
                        duration_ms=duration_ms,
                        error=error,
                    )

        return wrapper
    return decorator


def sanitize_url(url: str) -> str:
    """
    Sanitize URL for logging by removing sensitive query parameters

    Args:
        url: URL to sanitize

    Returns:
        Sanitized URL safe for logging
    """
    parsed = urlparse(url)
    query_params = parse_qs(parsed.query, keep_blank_values=True)

    sanitized_params = {
        param: [REDACTED] if param.lower() in SENSITIVE_KEYS else values
        for param, values in query_params.items()
    }

    return urlunparse((
        parsed.scheme,
        parsed.netloc,
        parsed.path,
        parsed.params,
        urlencode(sanitized_params, doseq=True),
        parsed.fragment,
    ))
