"""Note operations. Notes are stored as markdown; the html and text views
are rendered by the server."""

from __future__ import annotations

from typing import Any

from .base import ResourceClient
from .models import Note, NoteUpdate
from .validation import ensure_uuid, validate_input


class NotesClient(ResourceClient):
    async def get_note_markdown(self, brain_id: str, thought_id: str) -> Note:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        return await self._get_json(f"/notes/{brain_id}/{thought_id}", Note)

    async def get_note_html(self, brain_id: str, thought_id: str) -> Note:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        return await self._get_json(f"/notes/{brain_id}/{thought_id}/html", Note)

    async def get_note_text(self, brain_id: str, thought_id: str) -> Note:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        return await self._get_json(f"/notes/{brain_id}/{thought_id}/text", Note)

    async def create_or_update_note(self, brain_id: str, thought_id: str, note: NoteUpdate | dict[str, Any]) -> Note:
        """Replace a thought's note with new markdown."""
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        body = validate_input(NoteUpdate, note)
        return await self._request_json("POST", f"/notes/{brain_id}/{thought_id}/update", Note, json=body.to_api())

    async def append_to_note(self, brain_id: str, thought_id: str, content: str) -> Note:
        """Append markdown to the end of a thought's note."""
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        body = NoteUpdate(markdown=content)
        return await self._request_json("POST", f"/notes/{brain_id}/{thought_id}/append", Note, json=body.to_api())


__all__ = ["NotesClient"]
