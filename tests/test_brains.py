"""Tests for BrainsClient."""

from __future__ import annotations

import httpx
import pytest

from conftest import BRAIN_ID, THOUGHT_ID, TIMESTAMP, USER_ID
from thebrain import ResponseValidationError, ValidationError
from thebrain.sdk import Brain, BrainStatistics, EntityType


def _brain(**overrides):
    data = {
        "id": BRAIN_ID,
        "name": "Research",
        "homeThoughtId": THOUGHT_ID,
        "creationDateTime": TIMESTAMP,
    }
    data.update(overrides)
    return data


def _stats():
    return {
        "brainName": "Research",
        "dateGenerated": TIMESTAMP,
        "brainId": BRAIN_ID,
        "thoughts": 120,
        "forgottenThoughts": 3,
        "links": 240,
        "linksPerThought": 2.0,
        "thoughtTypes": 4,
        "linkTypes": 2,
        "tags": 7,
        "notes": 30,
        "internalFiles": 5,
        "internalFolders": 1,
        "externalFiles": 0,
        "externalFolders": 0,
        "webLinks": 9,
        "assignedIcons": 2,
        "internalFilesSize": 4096,
        "iconsFilesSize": 512,
    }


class TestBrainsClient:
    """Tests for brain endpoints."""

    @pytest.mark.asyncio
    async def test_get_brains(self, make_api) -> None:
        """Brains are parsed into models."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=[_brain(), {"name": "Sparse"}]))
        brains = await api.brains.get_brains()
        assert recorder.last.method == "GET"
        assert recorder.last.url.path == "/brains"
        assert isinstance(brains[0], Brain)
        assert brains[0].home_thought_id == THOUGHT_ID
        assert brains[1].id is None

    @pytest.mark.asyncio
    async def test_get_brain_rejects_malformed_id(self, make_api) -> None:
        """A present but malformed id fails response validation."""
        api, _ = make_api(lambda r: httpx.Response(200, json=_brain(id="not-a-uuid")))
        with pytest.raises(ResponseValidationError):
            await api.brains.get_brain(BRAIN_ID)

    @pytest.mark.asyncio
    async def test_get_brain_invalid_path_id(self, make_api) -> None:
        """Malformed brain ids are rejected before sending."""
        api, recorder = make_api()
        with pytest.raises(ValidationError, match="brain_id"):
            await api.brains.get_brain("../brains")
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_create_brain_multipart(self, make_api) -> None:
        """The name is sent as the brainName form field."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=[_brain(name="New Brain")]))
        brains = await api.brains.create_brain("New Brain")

        request = recorder.last
        content_type = request.headers["content-type"]
        assert request.method == "POST"
        assert content_type.startswith("multipart/form-data; boundary=")
        boundary = content_type.split("boundary=")[1]
        body = request.content.decode()
        assert f"--{boundary}" in body
        assert 'name="brainName"' in body
        assert "New Brain" in body
        assert brains[0].name == "New Brain"

    @pytest.mark.asyncio
    async def test_delete_brain(self, make_api) -> None:
        """Deletion issues DELETE and returns None."""
        api, recorder = make_api(lambda r: httpx.Response(200))
        assert await api.brains.delete_brain(BRAIN_ID) is None
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == f"/brains/{BRAIN_ID}"

    @pytest.mark.asyncio
    async def test_get_brain_stats(self, make_api) -> None:
        """Statistics are parsed with camelCase aliases."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=_stats()))
        stats = await api.brains.get_brain_stats(BRAIN_ID)
        assert recorder.last.url.path == f"/brains/{BRAIN_ID}/statistics"
        assert isinstance(stats, BrainStatistics)
        assert stats.links_per_thought == 2.0
        assert stats.internal_files_size == 4096

    @pytest.mark.asyncio
    async def test_get_brain_stats_missing_field(self, make_api) -> None:
        """Missing required statistics fail validation."""
        payload = _stats()
        del payload["thoughts"]
        api, _ = make_api(lambda r: httpx.Response(200, json=payload))
        with pytest.raises(ResponseValidationError, match="thoughts"):
            await api.brains.get_brain_stats(BRAIN_ID)

    @pytest.mark.asyncio
    async def test_get_brain_modifications(self, make_api) -> None:
        """Query parameters default maxLogs and omit unset bounds."""
        log = {
            "id": THOUGHT_ID,
            "brainId": BRAIN_ID,
            "sourceId": THOUGHT_ID,
            "sourceType": 2,
            "modType": 101,
            "userId": USER_ID,
            "creationDateTime": TIMESTAMP,
            "modificationDateTime": TIMESTAMP,
        }
        api, recorder = make_api(lambda r: httpx.Response(200, json=[log]))
        logs = await api.brains.get_brain_modifications(BRAIN_ID, start_time="2024-01-01T00:00:00Z")

        params = recorder.last.url.params
        assert params["maxLogs"] == "100"
        assert params["startTime"] == "2024-01-01T00:00:00Z"
        assert "endTime" not in params
        assert logs[0].source_type == EntityType.THOUGHT
