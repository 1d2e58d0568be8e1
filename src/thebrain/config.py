"""Configuration contract for the TheBrain API client.

This module provides the Pydantic-validated configuration model consumed by
:class:`thebrain.client.TheBrainApi`. Every option the facade understands is
declared here; transport options are an explicit, closed set that is
forwarded verbatim to ``httpx.AsyncClient``.

Both snake_case field names and the camelCase spellings used by the REST
service's own SDKs (``apiKey``, ``baseURL``, ``requestLimit``,
``rateLimitWindows``, ``logLevel``) are accepted.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://api.bra.in"
DEFAULT_REQUEST_LIMIT = 10
DEFAULT_RATE_LIMIT_WINDOW_MS = 1000


class LogLevel(str, Enum):
    """Log levels understood by the client logger."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def parse(cls, value: "str | LogLevel") -> "LogLevel":
        """Convert a string (any case, Python spellings allowed) to LogLevel."""
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            name = {"warning": "warn", "critical": "fatal"}.get(name, name)
            try:
                return cls(name)
            except ValueError:
                raise ValueError(f"Invalid log level: {value}. Must be one of {[e.value for e in cls]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(value)}")


class BrainApiConfig(BaseModel):
    """Client configuration.

    Only ``api_key`` is mandatory. ``request_limit`` requests are allowed per
    ``rate_limit_window_ms`` milliseconds; both must be strictly positive.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
    )

    api_key: str = Field(
        alias="apiKey",
        description="Bearer token sent as the Authorization header",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        alias="baseURL",
        description="Root URL of the REST API",
    )
    request_limit: int = Field(
        default=DEFAULT_REQUEST_LIMIT,
        alias="requestLimit",
        strict=True,
        gt=0,
        description="Maximum requests per rate-limit window",
    )
    rate_limit_window_ms: int = Field(
        default=DEFAULT_RATE_LIMIT_WINDOW_MS,
        alias="rateLimitWindows",
        strict=True,
        gt=0,
        description="Rate-limit window length in milliseconds",
    )
    log_level: Optional[LogLevel] = Field(
        default=None,
        alias="logLevel",
        description="Level applied to the package logger at construction",
    )

    # Transport passthrough (forwarded to httpx.AsyncClient when set)
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra headers sent with every request",
    )
    timeout: Optional[float] = Field(
        default=None,
        description="httpx timeout in seconds",
    )
    follow_redirects: Optional[bool] = Field(
        default=None,
        alias="followRedirects",
    )
    verify: Optional[Union[bool, str]] = Field(
        default=None,
        description="TLS verification flag or CA bundle path",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("API key is required")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> Optional[LogLevel]:
        if v is None:
            return None
        return LogLevel.parse(v)

    @property
    def authorization(self) -> str:
        return f"Bearer {self.api_key}"

    def request_headers(self) -> dict[str, str]:
        """Caller headers with the bearer Authorization header laid on top.

        Any caller header named ``authorization`` (in any casing) is dropped
        so the API key always wins.
        """
        merged = {k: v for k, v in self.headers.items() if k.lower() != "authorization"}
        merged["Authorization"] = self.authorization
        return merged

    def transport_options(self) -> dict[str, Any]:
        """Keyword arguments for the shared ``httpx.AsyncClient``."""
        options: dict[str, Any] = {
            "base_url": self.base_url,
            "headers": self.request_headers(),
        }
        for name in ("timeout", "follow_redirects", "verify"):
            value = getattr(self, name)
            if value is not None:
                options[name] = value
        return options


def default_log_level() -> LogLevel:
    """Initial logger level, read from LOG_LEVEL (default: info)."""
    import os

    return LogLevel.parse(os.getenv("LOG_LEVEL") or LogLevel.INFO.value)


def load_config_from_env(**overrides: Any) -> BrainApiConfig:
    """Load client configuration from environment variables.

    Together with default_log_level this is the ONLY place where os.getenv
    is used for client settings.
    Keyword overrides take precedence over the environment.

    Environment variables:
    - THEBRAIN_API_KEY: API key (required unless passed as override)
    - THEBRAIN_BASE_URL: API root URL
    - THEBRAIN_REQUEST_LIMIT: Requests per window
    - THEBRAIN_RATE_LIMIT_WINDOW_MS: Window length in milliseconds
    - THEBRAIN_TIMEOUT: Request timeout in seconds
    - LOG_LEVEL: trace, debug, info, warn, error, fatal

    Returns:
        BrainApiConfig instance with values from environment or defaults.
    """
    import os

    values: dict[str, Any] = {
        "api_key": os.getenv("THEBRAIN_API_KEY", ""),
        "base_url": os.getenv("THEBRAIN_BASE_URL", DEFAULT_BASE_URL),
        "request_limit": int(os.getenv("THEBRAIN_REQUEST_LIMIT", str(DEFAULT_REQUEST_LIMIT))),
        "rate_limit_window_ms": int(os.getenv("THEBRAIN_RATE_LIMIT_WINDOW_MS", str(DEFAULT_RATE_LIMIT_WINDOW_MS))),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    timeout = os.getenv("THEBRAIN_TIMEOUT")
    if timeout:
        values["timeout"] = float(timeout)
    values.update(overrides)
    return BrainApiConfig(**values)


__all__ = [
    "BrainApiConfig",
    "LogLevel",
    "load_config_from_env",
    "default_log_level",
    "DEFAULT_BASE_URL",
    "DEFAULT_REQUEST_LIMIT",
    "DEFAULT_RATE_LIMIT_WINDOW_MS",
]
