from .client import TheBrainApi
from .config import BrainApiConfig, LogLevel, load_config_from_env
from .exceptions import (
    ApiError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitedError,
    ResponseValidationError,
    ServerError,
    TheBrainError,
    TransportError,
    UnsafePathSegmentError,
    ValidationError,
)
from .logging import (
    BrainApiFormatter,
    get_log_level,
    redact_secrets,
    safe_preview,
    sanitize_headers,
    set_log_level,
    setup_logging,
)
from .rate_limit import FixedWindowRateLimiter

__version__ = "1.0.0"

__all__ = [
    'TheBrainApi',
    'BrainApiConfig',
    'LogLevel',
    'load_config_from_env',
    'FixedWindowRateLimiter',
    'TheBrainError',
    'ConfigurationError',
    'ValidationError',
    'UnsafePathSegmentError',
    'ResponseValidationError',
    'TransportError',
    'ApiError',
    'BadRequestError',
    'AuthenticationError',
    'PermissionDeniedError',
    'NotFoundError',
    'RateLimitedError',
    'ServerError',
    'safe_preview',
    'redact_secrets',
    'sanitize_headers',
    'BrainApiFormatter',
    'setup_logging',
    'set_log_level',
    'get_log_level',
]
