"""Shared fixtures: a TheBrainApi wired to an in-memory httpx transport."""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx
import pytest

from thebrain import TheBrainApi

BRAIN_ID = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
THOUGHT_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
OTHER_THOUGHT_ID = "9b2d1a4e-1c3f-4e5a-8b7c-6d5e4f3a2b1c"
LINK_ID = "c56a4180-65aa-42ec-a945-5fd21dec0538"
ATTACHMENT_ID = "16fd2706-8baf-433b-82eb-8c7fada847da"
USER_ID = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
TIMESTAMP = "2024-03-01T12:00:00Z"


class Recorder:
    """Mock transport that records every request it serves."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_api() -> Callable[..., tuple[TheBrainApi, Recorder]]:
    """Build a TheBrainApi whose HTTP client answers from ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response] | None = None, **options: Any):
        recorder = Recorder(handler or (lambda request: httpx.Response(200, json={})))
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(recorder),
            base_url="https://api.bra.in",
        )
        options.setdefault("api_key", "test-api-key")
        return TheBrainApi(http_client=client, **options), recorder

    return _make


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Keep log level changes from leaking between tests."""
    logger = logging.getLogger("thebrain")
    level = logger.level
    yield
    logger.setLevel(level)


def thought_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "id": THOUGHT_ID,
        "brainId": BRAIN_ID,
        "name": "Project Ideas",
        "kind": 1,
        "acType": 0,
        "creationDateTime": TIMESTAMP,
        "modificationDateTime": TIMESTAMP,
    }
    data.update(overrides)
    return data


def link_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "id": LINK_ID,
        "brainId": BRAIN_ID,
        "thoughtIdA": THOUGHT_ID,
        "thoughtIdB": OTHER_THOUGHT_ID,
        "relation": 1,
        "kind": 1,
        "direction": 0,
        "meaning": 1,
        "creationDateTime": TIMESTAMP,
        "modificationDateTime": TIMESTAMP,
    }
    data.update(overrides)
    return data


def attachment_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "id": ATTACHMENT_ID,
        "brainId": BRAIN_ID,
        "sourceId": THOUGHT_ID,
        "sourceType": 2,
        "name": "report.pdf",
        "type": 1,
        "isNotes": False,
        "dataLength": 2048,
        "creationDateTime": TIMESTAMP,
        "modificationDateTime": TIMESTAMP,
    }
    data.update(overrides)
    return data


def note_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "brainId": BRAIN_ID,
        "sourceId": THOUGHT_ID,
        "sourceType": 2,
        "markdown": "# Heading",
        "html": "<h1>Heading</h1>",
        "text": "Heading",
        "modificationDateTime": TIMESTAMP,
    }
    data.update(overrides)
    return data
