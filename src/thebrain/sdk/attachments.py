"""Attachment operations: metadata, binary content, file and URL uploads."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import IO, Optional, Union

from ..exceptions import ValidationError
from .base import ResourceClient, build_params
from .models import Attachment
from .validation import ensure_uuid

FileInput = Union[bytes, str, os.PathLike, IO[bytes]]


async def _file_part(file: FileInput, filename: Optional[str], content_type: Optional[str]) -> tuple:
    """Build the httpx multipart tuple for an upload.

    Files given by path are read in a worker thread.
    """
    if isinstance(file, (bytes, bytearray)):
        content: Union[bytes, IO[bytes]] = bytes(file)
        name = filename or "file"
    elif isinstance(file, (str, os.PathLike)):
        path = Path(file)
        content = await asyncio.to_thread(path.read_bytes)
        name = filename or path.name
    elif hasattr(file, "read"):
        content = file
        name = filename or os.path.basename(getattr(file, "name", "") or "") or "file"
    else:
        raise ValidationError(f"Unsupported file input of type {type(file).__name__}")

    if content_type:
        return (name, content, content_type)
    return (name, content)


class AttachmentsClient(ResourceClient):
    async def get_attachment_details(self, brain_id: str, attachment_id: str) -> Attachment:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(attachment_id, "attachment_id")
        return await self._get_json(f"/attachments/{brain_id}/{attachment_id}/metadata", Attachment)

    async def get_attachment_content(self, brain_id: str, attachment_id: str) -> bytes:
        """Download the attachment's file content as raw bytes."""
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(attachment_id, "attachment_id")
        return await self._get_bytes(f"/attachments/{brain_id}/{attachment_id}/file-content")

    async def delete_attachment(self, brain_id: str, attachment_id: str) -> None:
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(attachment_id, "attachment_id")
        await self._send("DELETE", f"/attachments/{brain_id}/{attachment_id}")

    async def add_file_attachment(
        self,
        brain_id: str,
        thought_id: str,
        file: FileInput,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> None:
        """Upload a file and attach it to a thought.

        Args:
            brain_id: Brain identifier.
            thought_id: Thought receiving the attachment.
            file: Raw bytes, a filesystem path, or a binary file object.
                A path is read in a worker thread; a file object is read
                by httpx as the request is sent.
            filename: Name sent with the part (default: derived from ``file``).
            content_type: MIME type of the part (default: guessed from name).

        The request body is ``multipart/form-data`` with a single ``file``
        part. The Content-Type header, including its boundary, is left to
        httpx.
        """
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        part = await _file_part(file, filename, content_type)
        await self._send("POST", f"/attachments/{brain_id}/{thought_id}/file", files={"file": part})

    async def add_url_attachment(
        self,
        brain_id: str,
        thought_id: str,
        url: str,
        name: Optional[str] = None,
    ) -> None:
        """Attach a URL to a thought. The server names it after the URL
        when ``name`` is omitted."""
        ensure_uuid(brain_id, "brain_id")
        ensure_uuid(thought_id, "thought_id")
        if not url:
            raise ValidationError("url is required")
        await self._send(
            "POST",
            f"/attachments/{brain_id}/{thought_id}/url",
            params=build_params(url=url, name=name),
        )


__all__ = ["AttachmentsClient"]
