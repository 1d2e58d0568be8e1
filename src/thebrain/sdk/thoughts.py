"""Thought operations: CRUD, graph traversal, pins, types, tags and history."""

from __future__ import annotations

from typing import Any

from .base import ResourceClient
from .models import (
    Attachment,
    CreateThoughtResponse,
    ModificationLog,
    Thought,
    ThoughtCreate,
    ThoughtGraph,
)
from .validation import ensure_uuid, normalize_patch_operations, validate_input

JSON_PATCH_CONTENT_TYPE = "application/json-patch+json"


class ThoughtsClient(ResourceClient):
    async def get_thoughts(self, brain_id: str) -> list[Thought]:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/thoughts/{brain_id}", list[Thought])

    async def get_thought(self, brain_id: str, thought_id: str) -> Thought:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        return await self._get_json(f"/thoughts/{brain_id}/{thought_id}", Thought)

    async def create_thought(self, brain_id: str, thought: ThoughtCreate | dict[str, Any]) -> CreateThoughtResponse:
        ensure_uuid(brain_id, "brain_id")
        body = validate_input(ThoughtCreate, thought)
        return await self._request_json("POST", f"/thoughts/{brain_id}", CreateThoughtResponse, json=body.to_api())

    async def update_thought(self, brain_id: str, thought_id: str, operations: Any) -> None:
        """Apply JSON Patch operations to a thought.

        ``operations`` is a list of operations or a wrapper document with an
        ``operations`` list. The bare list is sent as
        ``application/json-patch+json``.
        """
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        ops = normalize_patch_operations(operations)
        await self._send(
            "PATCH",
            f"/thoughts/{brain_id}/{thought_id}",
            json=[op.to_api() for op in ops],
            headers={"Content-Type": JSON_PATCH_CONTENT_TYPE},
        )

    async def delete_thought(self, brain_id: str, thought_id: str) -> None:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        await self._send("DELETE", f"/thoughts/{brain_id}/{thought_id}")

    async def get_thought_graph(
        self,
        brain_id: str,
        thought_id: str,
        include_siblings: bool = False,
    ) -> ThoughtGraph:
        """The thought with its parents, children, jumps, tags, links and
        attachments."""
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        return await self._get_json(
            f"/thoughts/{brain_id}/{thought_id}/graph",
            ThoughtGraph,
            {"includeSiblings": include_siblings},
        )

    async def get_thought_attachments(self, brain_id: str, thought_id: str) -> list[Attachment]:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        return await self._get_json(f"/thoughts/{brain_id}/{thought_id}/attachments", list[Attachment])

    async def get_types(self, brain_id: str) -> list[Thought]:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/thoughts/{brain_id}/types", list[Thought])

    async def get_tags(self, brain_id: str) -> list[Thought]:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/thoughts/{brain_id}/tags", list[Thought])

    async def get_pinned_thoughts(self, brain_id: str) -> list[Thought]:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/thoughts/{brain_id}/pins", list[Thought])

    async def pin_thought(self, brain_id: str, thought_id: str) -> None:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        await self._send("POST", f"/thoughts/{brain_id}/{thought_id}/pin")

    async def unpin_thought(self, brain_id: str, thought_id: str) -> None:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        await self._send("DELETE", f"/thoughts/{brain_id}/{thought_id}/pin")

    async def get_thought_modifications(
        self,
        brain_id: str,
        thought_id: str,
        max_logs: int = 100,
        include_related_logs: bool = True,
    ) -> list[ModificationLog]:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        return await self._get_json(
            f"/thoughts/{brain_id}/{thought_id}/modifications",
            list[ModificationLog],
            {"maxLogs": max_logs, "includeRelatedLogs": include_related_logs},
        )


__all__ = ["ThoughtsClient", "JSON_PATCH_CONTENT_TYPE"]
