"""Tests for ThoughtsClient."""

from __future__ import annotations

import json

import httpx
import pytest

from conftest import BRAIN_ID, OTHER_THOUGHT_ID, THOUGHT_ID, link_payload, thought_payload
from thebrain import ResponseValidationError, ValidationError
from thebrain.sdk import JsonPatchDocument, JsonPatchOperation, ThoughtCreate, ThoughtKind


class TestThoughtsCrud:
    """Tests for thought CRUD."""

    @pytest.mark.asyncio
    async def test_get_thought(self, make_api) -> None:
        """A thought is fetched and parsed."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=thought_payload()))
        thought = await api.thoughts.get_thought(BRAIN_ID, THOUGHT_ID)
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}/{THOUGHT_ID}"
        assert thought.kind == ThoughtKind.NORMAL
        assert thought.name == "Project Ideas"

    @pytest.mark.asyncio
    async def test_get_thought_bad_kind(self, make_api) -> None:
        """An unknown kind fails response validation."""
        api, _ = make_api(lambda r: httpx.Response(200, json=thought_payload(kind=42)))
        with pytest.raises(ResponseValidationError):
            await api.thoughts.get_thought(BRAIN_ID, THOUGHT_ID)

    @pytest.mark.asyncio
    async def test_create_thought(self, make_api) -> None:
        """The body is sent as camelCase JSON."""
        api, recorder = make_api(lambda r: httpx.Response(200, json={"id": OTHER_THOUGHT_ID}))
        result = await api.thoughts.create_thought(
            BRAIN_ID,
            ThoughtCreate(name="Child", kind=ThoughtKind.NORMAL, source_thought_id=THOUGHT_ID, relation=1),
        )
        body = json.loads(recorder.last.content)
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}"
        assert body == {"name": "Child", "kind": 1, "sourceThoughtId": THOUGHT_ID, "relation": 1}
        assert result.id == OTHER_THOUGHT_ID

    @pytest.mark.asyncio
    async def test_create_thought_from_dict(self, make_api) -> None:
        """Plain dicts are validated into ThoughtCreate."""
        api, recorder = make_api(lambda r: httpx.Response(200, json={"id": OTHER_THOUGHT_ID}))
        await api.thoughts.create_thought(BRAIN_ID, {"name": "Loose", "label": "tag"})
        assert json.loads(recorder.last.content) == {"name": "Loose", "label": "tag"}

    @pytest.mark.asyncio
    async def test_create_thought_missing_name(self, make_api) -> None:
        """A body without a name is rejected locally."""
        api, recorder = make_api()
        with pytest.raises(ValidationError, match="name"):
            await api.thoughts.create_thought(BRAIN_ID, {"kind": 1})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_delete_thought(self, make_api) -> None:
        """Deletion issues DELETE."""
        api, recorder = make_api(lambda r: httpx.Response(200))
        await api.thoughts.delete_thought(BRAIN_ID, THOUGHT_ID)
        assert recorder.last.method == "DELETE"


class TestThoughtPatch:
    """Tests for JSON Patch updates."""

    @pytest.mark.asyncio
    async def test_patch_sends_raw_array(self, make_api) -> None:
        """The patch is sent as a bare operation array."""
        api, recorder = make_api(lambda r: httpx.Response(200))
        await api.thoughts.update_thought(
            BRAIN_ID,
            THOUGHT_ID,
            [{"op": "replace", "path": "/name", "value": "Renamed"}],
        )
        request = recorder.last
        assert request.method == "PATCH"
        assert request.headers["content-type"] == "application/json-patch+json"
        assert json.loads(request.content) == [{"op": "replace", "path": "/name", "value": "Renamed"}]

    @pytest.mark.asyncio
    async def test_patch_wrapper_normalized(self, make_api) -> None:
        """A wrapper document is unwrapped before sending."""
        api, recorder = make_api(lambda r: httpx.Response(200))
        document = JsonPatchDocument(
            operations=[
                JsonPatchOperation(op="replace", path="/label", value="x"),
                JsonPatchOperation(op="remove", path="/foregroundColor"),
            ]
        )
        await api.thoughts.update_thought(BRAIN_ID, THOUGHT_ID, document)
        assert json.loads(recorder.last.content) == [
            {"op": "replace", "path": "/label", "value": "x"},
            {"op": "remove", "path": "/foregroundColor"},
        ]

    @pytest.mark.asyncio
    async def test_patch_wrapper_dict(self, make_api) -> None:
        """A dict with an operations key is accepted."""
        api, recorder = make_api(lambda r: httpx.Response(200))
        await api.thoughts.update_thought(
            BRAIN_ID,
            THOUGHT_ID,
            {"operations": [{"op": "move", "path": "/label", "from": "/name"}]},
        )
        assert json.loads(recorder.last.content) == [{"op": "move", "path": "/label", "from": "/name"}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("document", [[], {"operations": []}, {}, JsonPatchDocument(), None])
    async def test_empty_patch_sends_nothing(self, make_api, document) -> None:
        """Empty patches fail locally without a request."""
        api, recorder = make_api()
        with pytest.raises(ValidationError, match="Operations array is required and cannot be empty"):
            await api.thoughts.update_thought(BRAIN_ID, THOUGHT_ID, document)
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_invalid_op_rejected(self, make_api) -> None:
        """Unknown operations fail locally."""
        api, recorder = make_api()
        with pytest.raises(ValidationError):
            await api.thoughts.update_thought(BRAIN_ID, THOUGHT_ID, [{"op": "merge", "path": "/name"}])
        assert recorder.requests == []


class TestThoughtQueries:
    """Tests for graph, pins, types, tags and history."""

    @pytest.mark.asyncio
    async def test_get_thought_graph(self, make_api) -> None:
        """The graph is parsed with nested thoughts and links."""
        graph = {
            "activeThought": thought_payload(),
            "children": [thought_payload(id=OTHER_THOUGHT_ID, name="Child")],
            "links": [link_payload()],
        }
        api, recorder = make_api(lambda r: httpx.Response(200, json=graph))
        result = await api.thoughts.get_thought_graph(BRAIN_ID, THOUGHT_ID)
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}/{THOUGHT_ID}/graph"
        assert recorder.last.url.params["includeSiblings"] == "false"
        assert result.children[0].name == "Child"
        assert result.links[0].thought_id_b == OTHER_THOUGHT_ID
        assert result.parents is None

    @pytest.mark.asyncio
    async def test_get_thought_graph_with_siblings(self, make_api) -> None:
        """includeSiblings is serialized as true."""
        api, recorder = make_api(lambda r: httpx.Response(200, json={"activeThought": thought_payload()}))
        await api.thoughts.get_thought_graph(BRAIN_ID, THOUGHT_ID, include_siblings=True)
        assert recorder.last.url.params["includeSiblings"] == "true"

    @pytest.mark.asyncio
    async def test_get_thought_graph_missing_active(self, make_api) -> None:
        """activeThought is required in a graph."""
        api, _ = make_api(lambda r: httpx.Response(200, json={"children": []}))
        with pytest.raises(ResponseValidationError):
            await api.thoughts.get_thought_graph(BRAIN_ID, THOUGHT_ID)

    @pytest.mark.asyncio
    async def test_types_and_tags(self, make_api) -> None:
        """Types and tags are listed from their endpoints."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=[thought_payload(kind=2)]))
        types = await api.thoughts.get_types(BRAIN_ID)
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}/types"
        assert types[0].kind == ThoughtKind.TYPE

        await api.thoughts.get_tags(BRAIN_ID)
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}/tags"

    @pytest.mark.asyncio
    async def test_pins(self, make_api) -> None:
        """Pinning uses POST and unpinning DELETE on the pin path."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=[]))
        await api.thoughts.get_pinned_thoughts(BRAIN_ID)
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}/pins"

        await api.thoughts.pin_thought(BRAIN_ID, THOUGHT_ID)
        assert (recorder.last.method, recorder.last.url.path) == ("POST", f"/thoughts/{BRAIN_ID}/{THOUGHT_ID}/pin")

        await api.thoughts.unpin_thought(BRAIN_ID, THOUGHT_ID)
        assert (recorder.last.method, recorder.last.url.path) == ("DELETE", f"/thoughts/{BRAIN_ID}/{THOUGHT_ID}/pin")

    @pytest.mark.asyncio
    async def test_thought_modifications_defaults(self, make_api) -> None:
        """History defaults to 100 logs including related logs."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=[]))
        await api.thoughts.get_thought_modifications(BRAIN_ID, THOUGHT_ID)
        params = recorder.last.url.params
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}/{THOUGHT_ID}/modifications"
        assert params["maxLogs"] == "100"
        assert params["includeRelatedLogs"] == "true"

    @pytest.mark.asyncio
    async def test_thought_attachments(self, make_api) -> None:
        """Attachments of a thought are listed."""
        api, recorder = make_api(lambda r: httpx.Response(200, json=[]))
        assert await api.thoughts.get_thought_attachments(BRAIN_ID, THOUGHT_ID) == []
        assert recorder.last.url.path == f"/thoughts/{BRAIN_ID}/{THOUGHT_ID}/attachments"
