"""Shared HTTP channel: client factory, interceptor chain and error mapping.

Every resource client sends through one ``httpx.AsyncClient``. Its
``event_hooks`` form the interceptor chain:

    request:  rate-limit gate -> log_request
    response: log_response

``send`` turns transport failures into TransportError and non-2xx
responses into the matching ApiError subclass. Nothing is retried.
"""

from __future__ import annotations

from typing import Any

import httpx

from .config import BrainApiConfig
from .exceptions import ConfigurationError, TransportError, error_for_status
from .logging import log_request, log_request_error, log_response
from .rate_limit import FixedWindowRateLimiter

_INSTALLED_ATTR = "_thebrain_interceptors"


def create_http_client(config: BrainApiConfig) -> httpx.AsyncClient:
    """Create the shared client from the config's transport options."""
    return httpx.AsyncClient(**config.transport_options())


def install_interceptors(client: httpx.AsyncClient, rate_limiter: FixedWindowRateLimiter) -> None:
    """Append the rate-limit and logging hooks to ``client``.

    Installing the same limiter again is a no-op. A client already throttled
    by a different limiter is rejected.

    Raises:
        ConfigurationError: ``client`` already carries another limiter.
    """
    installed = getattr(client, _INSTALLED_ATTR, None)
    if installed is rate_limiter:
        return
    if installed is not None:
        raise ConfigurationError(
            "HTTP client is already in use by another TheBrainApi instance; "
            "give each instance its own client"
        )

    hooks = client.event_hooks
    hooks["request"].extend([rate_limiter, log_request])
    hooks["response"].append(log_response)
    client.event_hooks = hooks
    setattr(client, _INSTALLED_ATTR, rate_limiter)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def raise_for_status(response: httpx.Response) -> None:
    """Raise the ApiError subclass matching a non-2xx response."""
    if response.is_success:
        return
    error_cls = error_for_status(response.status_code)
    raise error_cls(
        status_code=response.status_code,
        response_body=_response_body(response),
        method=response.request.method,
        url=str(response.request.url),
    )


async def send(client: httpx.AsyncClient, method: str, url: str, **kwargs: Any) -> httpx.Response:
    """Send one request through the interceptor chain.

    Raises:
        TransportError: The request produced no response.
        ApiError: The response status is not 2xx.
    """
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        log_request_error(e)
        raise TransportError(f"Failed to make request: {e}", method=method, url=url) from e

    raise_for_status(response)
    return response


__all__ = [
    "create_http_client",
    "install_interceptors",
    "raise_for_status",
    "send",
]
