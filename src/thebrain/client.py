"""TheBrainApi - the single entry point of the client.

Constructing a ``TheBrainApi`` validates the configuration, applies the log
level, builds (or adopts) the shared ``httpx.AsyncClient``, installs the
rate-limit and logging hooks on it, and wires one resource client per API
area onto that same HTTP client.

Example:
    async with TheBrainApi(api_key="...") as api:
        brains = await api.brains.get_brains()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import BrainApiConfig, LogLevel
from .exceptions import ConfigurationError
from .logging import get_log_level, set_log_level
from .rate_limit import FixedWindowRateLimiter
from .sdk.attachments import AttachmentsClient
from .sdk.brain_access import BrainAccessClient
from .sdk.brains import BrainsClient
from .sdk.links import LinksClient
from .sdk.notes import NotesClient
from .sdk.notes_images import NotesImagesClient
from .sdk.search import SearchClient
from .sdk.thoughts import ThoughtsClient
from .sdk.users import UsersClient
from .sdk.validation import format_errors
from .transport import create_http_client, install_interceptors

logger = logging.getLogger(__name__)


def _build_config(config: Union[BrainApiConfig, Mapping[str, Any], None], options: dict[str, Any]) -> BrainApiConfig:
    if isinstance(config, BrainApiConfig):
        if not options:
            return config
        config = config.model_dump(exclude_unset=True)
    values = {**dict(config or {}), **options}
    try:
        return BrainApiConfig.model_validate(values)
    except PydanticValidationError as e:
        errors = format_errors(e)
        raise ConfigurationError("Invalid configuration: " + "; ".join(errors), errors=errors) from e


def _adopt_client(client: httpx.AsyncClient, config: BrainApiConfig) -> None:
    """Apply the bearer header (and base URL, if the client has none)."""
    if not client.base_url.host:
        client.base_url = config.base_url
    client.headers.update(config.request_headers())


class TheBrainApi:
    """Client facade for TheBrain REST API.

    Args:
        config: ``BrainApiConfig`` or a mapping of options (snake_case or
            camelCase keys).
        http_client: Optional pre-built ``httpx.AsyncClient``. The client
            hooks and the Authorization header are installed on it; it is
            not closed by :meth:`aclose`.
        **options: Configuration options, overriding ``config``.

    Raises:
        ConfigurationError: The configuration is missing the API key or a
            numeric option is not a positive integer, or ``http_client`` is
            already used by another instance.
    """

    def __init__(
        self,
        config: Union[BrainApiConfig, Mapping[str, Any], None] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **options: Any,
    ):
        self.config = _build_config(config, options)

        if self.config.log_level is not None:
            set_log_level(self.config.log_level)

        self.rate_limiter = FixedWindowRateLimiter(
            self.config.request_limit,
            self.config.rate_limit_window_ms,
        )

        if http_client is None:
            self.http_client = create_http_client(self.config)
            self._owns_client = True
            install_interceptors(self.http_client, self.rate_limiter)
        else:
            install_interceptors(http_client, self.rate_limiter)
            _adopt_client(http_client, self.config)
            self.http_client = http_client
            self._owns_client = False

        self.brains = BrainsClient(self.http_client)
        self.thoughts = ThoughtsClient(self.http_client)
        self.links = LinksClient(self.http_client)
        self.attachments = AttachmentsClient(self.http_client)
        self.notes = NotesClient(self.http_client)
        self.notes_images = NotesImagesClient(self.http_client)
        self.search = SearchClient(self.http_client)
        self.users = UsersClient(self.http_client)
        self.brain_access = BrainAccessClient(self.http_client)

        logger.debug(
            "TheBrainApi initialized for %s (%d requests per %d ms)",
            self.config.base_url,
            self.config.request_limit,
            self.config.rate_limit_window_ms,
        )

    def set_log_level(self, level: str | LogLevel) -> None:
        """Change the log level. Takes effect for every instance at once."""
        set_log_level(level)

    def get_log_level(self) -> str:
        return get_log_level()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "TheBrainApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["TheBrainApi"]
