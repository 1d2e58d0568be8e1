"""Link operations between thoughts."""

from __future__ import annotations

from typing import Any

from .base import ResourceClient
from .models import Attachment, CreateLinkResponse, Link, LinkCreate
from .thoughts import JSON_PATCH_CONTENT_TYPE
from .validation import ensure_uuid, normalize_patch_operations, validate_input


class LinksClient(ResourceClient):
    async def get_links(self, brain_id: str) -> list[Link]:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/links/{brain_id}", list[Link])

    async def get_link(self, brain_id: str, link_id: str) -> Link:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(link_id, "link_id")
        return await self._get_json(f"/links/{brain_id}/{link_id}", Link)

    async def create_link(self, brain_id: str, link: LinkCreate | dict[str, Any]) -> CreateLinkResponse:
        """Create a link connecting ``thought_id_a`` and ``thought_id_b``."""
        ensure_uuid(brain_id, "brain_id")
        body = validate_input(LinkCreate, link)
        return await self._request_json("POST", f"/links/{brain_id}", CreateLinkResponse, json=body.to_api())

    async def update_link(self, brain_id: str, link_id: str, operations: Any) -> None:
        """Apply JSON Patch operations to a link (see ThoughtsClient.update_thought)."""
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(link_id, "link_id")
        ops = normalize_patch_operations(operations)
        await self._send(
            "PATCH",
            f"/links/{brain_id}/{link_id}",
            json=[op.to_api() for op in ops],
            headers={"Content-Type": JSON_PATCH_CONTENT_TYPE},
        )

    async def delete_link(self, brain_id: str, link_id: str) -> None:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(link_id, "link_id")
        await self._send("DELETE", f"/links/{brain_id}/{link_id}")

    async def get_link_attachments(self, brain_id: str, link_id: str) -> list[Attachment]:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(link_id, "link_id")
        return await self._get_json(f"/links/{brain_id}/{link_id}/attachments", list[Attachment])


__all__ = ["LinksClient"]
