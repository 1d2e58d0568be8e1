"""Exception hierarchy for the TheBrain API client.

Every error raised by this package inherits from TheBrainError and carries a
stable ``code``. The four families are:

- ConfigurationError: bad client configuration, raised at construction.
- ValidationError: bad caller input, raised before any request is sent.
- ResponseValidationError: the server answered 2xx with a payload that does
  not match the expected schema.
- ApiError / TransportError: the HTTP exchange itself failed. Nothing is
  retried.

Usage:
    from thebrain.exceptions import NotFoundError, ValidationError

    try:
        thought = await api.thoughts.get_thought(brain_id, thought_id)
    except NotFoundError as e:
        print(e.status_code, e.response_body)
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, cast

__all__ = [
    # Base hierarchy
    "TheBrainError",
    "ConfigurationError",
    "ValidationError",
    "UnsafePathSegmentError",
    "ResponseValidationError",
    "TransportError",
    "ApiError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    # Registry
    "ErrorRegistry",
    "error_registry",
    "register_error",
    "error_for_status",
]


# ---- Exception Hierarchy ----------------------------------------------------


class TheBrainError(Exception):
    """Base exception for the client.

    Attributes:
        code: Stable error code string (e.g. "NOT_FOUND").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(TheBrainError):
    """Invalid or missing client configuration."""

    code: str = "CONFIGURATION_ERROR"


class ValidationError(TheBrainError):
    """Caller input rejected locally; no request was sent."""

    code: str = "VALIDATION_ERROR"
    message: str = "Invalid input"

    def __init__(self, message: str | None = None, errors: list[str] | None = None, **kwargs: Any) -> None:
        self.errors = list(errors) if errors else ([message] if message else [])
        super().__init__(message, **kwargs)


class UnsafePathSegmentError(ValidationError):
    """A URL path segment contains a separator or traversal sequence."""

    code: str = "UNSAFE_PATH_SEGMENT"
    message: str = "Invalid path segment"


class ResponseValidationError(TheBrainError):
    """Response payload does not match its schema."""

    code: str = "RESPONSE_VALIDATION_ERROR"
    message: str = "Response failed schema validation"

    def __init__(
        self,
        message: str | None = None,
        errors: list[str] | None = None,
        payload: Any = None,
        **kwargs: Any,
    ) -> None:
        self.errors = list(errors or [])
        self.payload = payload
        if message is None and self.errors:
            message = f"{self.message}: " + "; ".join(self.errors)
        super().__init__(message, **kwargs)


class TransportError(TheBrainError):
    """Connection, timeout or protocol failure below the HTTP status layer."""

    code: str = "TRANSPORT_ERROR"


class ApiError(TheBrainError):
    """The server answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code.
        response_body: Decoded JSON body when possible, otherwise text.
        method: HTTP method of the failed request.
        url: Full URL of the failed request.
    """

    code: str = "API_ERROR"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        response_body: Any = None,
        method: str | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        self.method = method
        self.url = url
        if message is None:
            message = f"Request failed with status {status_code if status_code is not None else 'unknown'}"
            if method and url:
                message += f": {method} {url}"
        super().__init__(message, **kwargs)


class BadRequestError(ApiError):
    code: str = "BAD_REQUEST"


class AuthenticationError(ApiError):
    code: str = "UNAUTHENTICATED"


class PermissionDeniedError(ApiError):
    code: str = "PERMISSION_DENIED"


class NotFoundError(ApiError):
    code: str = "NOT_FOUND"


class RateLimitedError(ApiError):
    code: str = "RATE_LIMITED"


class ServerError(ApiError):
    code: str = "SERVER_ERROR"


# ---- Error Registry ---------------------------------------------------------

_E = TypeVar("_E", bound=type[TheBrainError])


class ErrorRegistry:
    """Registry mapping stable error codes to exception classes."""

    def __init__(self) -> None:
        self._errors: dict[str, type[TheBrainError]] = {}

    def register(self, code: str, error_cls: type[TheBrainError]) -> None:
        self._errors[code] = error_cls

    def get(self, code: str) -> type[TheBrainError] | None:
        return self._errors.get(code)

    def all(self) -> dict[str, type[TheBrainError]]:
        return dict(self._errors)


error_registry = ErrorRegistry()


def register_error(code: str) -> Callable[[_E], _E]:
    """Decorator to register a custom error type.

    Usage:
        @register_error("CONFLICT")
        class ConflictError(ApiError):
            code = "CONFLICT"
    """

    def decorator(cls: _E) -> _E:
        error_registry.register(code, cls)
        return cls

    return cast(Callable[[_E], _E], decorator)


for _cls in (
    TheBrainError,
    ConfigurationError,
    ValidationError,
    UnsafePathSegmentError,
    ResponseValidationError,
    TransportError,
    ApiError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    RateLimitedError,
    ServerError,
):
    error_registry.register(_cls.code, _cls)


_STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHENTICATED",
    403: "PERMISSION_DENIED",
    404: "NOT_FOUND",
    429: "RATE_LIMITED",
}


def error_for_status(status_code: int) -> type[ApiError]:
    """Resolve the ApiError subclass for an HTTP status code."""
    if status_code >= 500:
        code = "SERVER_ERROR"
    else:
        code = _STATUS_CODES.get(status_code, "API_ERROR")
    error_cls = error_registry.get(code)
    if error_cls is None or not issubclass(error_cls, ApiError):
        return ApiError
    return error_cls
