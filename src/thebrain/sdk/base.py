"""Base class for resource clients.

A resource client is stateless apart from the shared ``httpx.AsyncClient``
it was built with; every call is an independent REST exchange.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..exceptions import ResponseValidationError
from ..transport import send
from .validation import parse_response


def build_params(**params: Any) -> dict[str, Any]:
    """Drop unset values and empty lists so they are never sent as ``key=``."""
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = [str(v) for v in value]
        cleaned[key] = value
    return cleaned


class ResourceClient:
    """Holds the shared HTTP client and the request/parse helpers."""

    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        return await send(self._http, method, path, **kwargs)

    async def _request_json(
        self,
        method: str,
        path: str,
        schema: Any,
        *,
        params: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ) -> Any:
        """Send a request and validate its JSON body against ``schema``."""
        response = await self._send(method, path, params=params, **kwargs)
        return parse_response(schema, self._json(response))

    async def _get_json(self, path: str, schema: Any, params: Optional[dict[str, Any]] = None) -> Any:
        return await self._request_json("GET", path, schema, params=params)

    async def _get_bytes(self, path: str) -> bytes:
        response = await self._send("GET", path)
        return response.content

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ResponseValidationError(
                f"Response body from {response.request.url} is not valid JSON",
                payload=response.text,
            ) from e


__all__ = ["ResourceClient", "build_params"]
