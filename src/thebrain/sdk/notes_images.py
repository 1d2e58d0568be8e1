"""Images embedded in notes.

Note images are addressed by a short-lived token issued with the note, so
the token and filename are caller-controlled path segments. Both are checked
for separators and traversal sequences, raw and percent-decoded, before any
request is made, then percent-encoded into the path.
"""

from __future__ import annotations

import base64
from urllib.parse import quote

from .base import ResourceClient
from .validation import ensure_safe_path_segment, ensure_uuid

# Characters encodeURIComponent leaves alone, beyond unreserved ones.
_SEGMENT_SAFE = "!~*'()"

_b64encode = base64.b64encode


def _segment(value: str) -> str:
    return quote(value, safe=_SEGMENT_SAFE)


def to_data_url(data: bytes, mime_type: str) -> str:
    """Encode bytes as a ``data:`` URL."""
    return f"data:{mime_type};base64,{_b64encode(data).decode('ascii')}"


class NotesImagesClient(ResourceClient):
    async def get_note_image(self, brain_id: str, token: str, filename: str) -> bytes:
        """Fetch a note image as raw bytes.

        Raises:
            ValidationError: ``brain_id`` is not a UUID.
            UnsafePathSegmentError: ``token`` or ``filename`` contains a
                path separator or traversal sequence.
        """
        ensure_uuid(brain_id, "brain_id")
        ensure_safe_path_segment(token, "token")
        ensure_safe_path_segment(filename, "filename")
        return await self._get_bytes(f"/notes-images/{_segment(brain_id)}/{_segment(token)}/{_segment(filename)}")

    async def get_note_image_as_data_url(self, brain_id: str, token: str, filename: str, mime_type: str) -> str:
        """Fetch a note image and return it as a base64 ``data:`` URL,
        suitable for an ``<img src>``."""
        data = await self.get_note_image(brain_id, token, filename)
        return to_data_url(data, mime_type)


__all__ = ["NotesImagesClient", "to_data_url"]
