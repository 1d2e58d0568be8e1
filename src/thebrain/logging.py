"""Logging for the TheBrain API client.

This module provides:
- The package logger (``thebrain``) with a process-wide, mutable level
- A TRACE level below DEBUG so all six client levels map onto ``logging``
- Header redaction for Authorization/Cookie/Set-Cookie
- Serializers turning httpx requests, responses and errors into log fields
- The request/response hooks installed on the shared HTTP client
- A structured JSON formatter and an opt-in ``setup_logging``
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import IO, Any, Optional

import httpx

from .config import BrainApiConfig, LogLevel, default_log_level

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "thebrain"

REDACTED = "[REDACTED]"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})

_LEVELS: dict[LogLevel, int] = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}
_NAMES: dict[int, LogLevel] = {v: k for k, v in _LEVELS.items()}

# Patterns for secrets that may leak into free-text messages
SECRET_PATTERNS = [
    r"(?i)(?:bearer|basic)\s+[a-zA-Z0-9._~+/=-]+",
    r'(?i)(?:api[_-]?key|apikey|token|password|secret)\s*[:=]\s*["\']?[^"\'\s,}]+',
]


def _initial_level() -> int:
    try:
        return _LEVELS[default_log_level()]
    except ValueError:
        return logging.INFO


logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(_initial_level())


def set_log_level(level: str | LogLevel) -> None:
    """Set the package log level.

    The level is process-wide: it applies immediately to every client
    instance and to calls already in flight.
    """
    logger.setLevel(_LEVELS[LogLevel.parse(level)])


def get_log_level() -> str:
    """Return the current package log level by its canonical name."""
    level = logger.level
    if level in _NAMES:
        return _NAMES[level].value
    return logging.getLevelName(level).lower()


def sanitize_headers(headers: Mapping[str, Any] | httpx.Headers | None) -> dict[str, Any]:
    """Copy headers with sensitive values replaced by ``[REDACTED]``.

    Matching is case-insensitive; header names keep their original casing
    and every other header passes through untouched.
    """
    if headers is None:
        return {}
    if isinstance(headers, httpx.Headers):
        items = [(k.decode(headers.encoding), v.decode(headers.encoding)) for k, v in headers.raw]
    else:
        items = list(headers.items())

    sanitized: dict[str, Any] = {}
    for name, value in items:
        sanitized[name] = REDACTED if name.lower() in SENSITIVE_HEADERS else value
    return sanitized


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a safe, length-bounded, single-line preview of a value.

    Binary values are summarised by size rather than decoded.
    """
    if value is None:
        return ""

    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"
    return s


def redact_secrets(text: str, replacement: str = REDACTED) -> str:
    """Redact bearer tokens and key/value secrets from free text."""
    if not isinstance(text, str):
        return text

    result = text
    for pattern in SECRET_PATTERNS:
        result = re.sub(pattern, replacement, result)
    return result


def _body_preview(content: bytes, content_type: str | None, limit: int = 240) -> str:
    if not content:
        return ""
    content_type = (content_type or "").lower()
    if "json" in content_type or content_type.startswith("text/"):
        return safe_preview(content.decode("utf-8", errors="replace"), limit=limit)
    return safe_preview(content, limit=limit)


def _request_body(request: httpx.Request) -> str:
    try:
        content = request.content
    except httpx.RequestNotRead:
        return "<streaming body>"
    return _body_preview(content, request.headers.get("content-type"))


def _response_body(response: httpx.Response) -> str:
    try:
        content = response.content
    except httpx.ResponseNotRead:
        return "<unread body>"
    return _body_preview(content, response.headers.get("content-type"))


def _request_of(response: httpx.Response) -> Optional[httpx.Request]:
    try:
        return response.request
    except RuntimeError:
        return None


def serialize_request(request: httpx.Request) -> dict[str, Any]:
    """Log fields for an outgoing request."""
    timeout = request.extensions.get("timeout")
    return {
        "method": request.method,
        "url": str(request.url),
        "params": dict(request.url.params.multi_items()),
        "headers": sanitize_headers(request.headers),
        "data": _request_body(request),
        "timeout": timeout.get("read") if isinstance(timeout, dict) else timeout,
    }


def serialize_response(response: httpx.Response) -> dict[str, Any]:
    """Log fields for an incoming response."""
    data: dict[str, Any] = {
        "status": response.status_code,
        "statusText": response.reason_phrase,
        "headers": sanitize_headers(response.headers),
        "data": _response_body(response),
    }
    request = _request_of(response)
    if request is not None:
        data["config"] = {"method": request.method, "url": str(request.url)}
    return data


def serialize_error(
    error: Optional[BaseException] = None,
    *,
    request: Optional[httpx.Request] = None,
    response: Optional[httpx.Response] = None,
) -> dict[str, Any]:
    """Log fields for a failed exchange (transport error or error status)."""
    if request is None and isinstance(error, httpx.RequestError):
        try:
            request = error.request
        except RuntimeError:
            request = None
    if response is not None and request is None:
        request = _request_of(response)

    data: dict[str, Any] = {
        "message": str(error) if error is not None else None,
        "code": type(error).__name__ if error is not None else None,
    }
    if response is not None:
        data.update(
            status=response.status_code,
            statusText=response.reason_phrase,
            headers=sanitize_headers(response.headers),
            data=_response_body(response),
        )
    if request is not None:
        data["config"] = {"method": request.method, "url": str(request.url)}
    return data


# ---- httpx event hooks ------------------------------------------------------


async def log_request(request: httpx.Request) -> None:
    """Request hook: debug-log every outgoing request."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Outgoing request",
            extra={
                "req": serialize_request(request),
                "detail": f"Making {request.method} request to {request.url}",
            },
        )


async def log_response(response: httpx.Response) -> None:
    """Response hook: debug-log successes, error-log failure statuses."""
    if response.is_error:
        await response.aread()
        logger.error(
            "Response error",
            extra={
                "err": serialize_error(response=response),
                "detail": f"Request failed with status {response.status_code}: {response.reason_phrase}",
            },
        )
    elif logger.isEnabledFor(logging.DEBUG):
        await response.aread()
        logger.debug(
            "Incoming response",
            extra={
                "res": serialize_response(response),
                "detail": f"Received {response.status_code} response from {response.request.url}",
            },
        )


def log_request_error(error: BaseException, request: Optional[httpx.Request] = None) -> None:
    """Error-log a request that never produced a response."""
    logger.error(
        "Request error",
        extra={
            "err": serialize_error(error, request=request),
            "detail": f"Failed to make request: {error}",
        },
    )


# ---- Formatting -------------------------------------------------------------

_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName",
    }
)


class BrainApiFormatter(logging.Formatter):
    """Formatter emitting one JSON object (or one plain line) per record.

    Structured extras such as ``req``, ``res`` and ``err`` are kept as
    nested objects in JSON mode.
    """

    def __init__(
        self,
        json_format: bool = True,
        redact_secrets: bool = True,
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.json_format = json_format
        self.redact_secrets = redact_secrets

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        if self.redact_secrets:
            log_data["message"] = redact_secrets(log_data["message"])
            if "detail" in log_data:
                log_data["detail"] = redact_secrets(str(log_data["detail"]))

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            log_data["level"],
            log_data["logger"],
            f": {log_data['message']}",
        ]
        if "detail" in log_data:
            parts.append(f"({log_data['detail']})")
        return " ".join(parts)


def setup_logging(
    config: Optional[BrainApiConfig] = None,
    json_format: bool = True,
    redact_secrets: bool = True,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Attach a formatted stream handler to the package logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        config: Optional client config; its log_level is applied if set.
        json_format: Emit JSON lines (default) or plain text.
        redact_secrets: Redact bearer tokens from messages.
        stream: Target stream (default: stderr).

    Returns:
        The installed handler.
    """
    for handler in logger.handlers[:]:
        if getattr(handler, "_thebrain_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(BrainApiFormatter(json_format=json_format, redact_secrets=redact_secrets))
    handler._thebrain_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False

    if config is not None and config.log_level is not None:
        set_log_level(config.log_level)
    return handler


__all__ = [
    "TRACE",
    "LOGGER_NAME",
    "REDACTED",
    "SENSITIVE_HEADERS",
    "logger",
    "set_log_level",
    "get_log_level",
    "sanitize_headers",
    "safe_preview",
    "redact_secrets",
    "serialize_request",
    "serialize_response",
    "serialize_error",
    "log_request",
    "log_response",
    "log_request_error",
    "BrainApiFormatter",
    "setup_logging",
]
