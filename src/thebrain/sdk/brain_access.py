"""Brain access control: list accessors, grant and revoke access.

Access requests identify the user by exactly one of ``email_address`` or
``user_id``; anything else is rejected locally.
"""

from __future__ import annotations

from typing import Any

from .base import ResourceClient
from .models import BrainAccessor, RemoveBrainAccess, SetBrainAccess
from .validation import ensure_uuid, validate_input


class BrainAccessClient(ResourceClient):
    async def get_brain_accessors(self, brain_id: str) -> list[BrainAccessor]:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/brain-access/{brain_id}", list[BrainAccessor])

    async def set_brain_access_level(self, brain_id: str, access: SetBrainAccess | dict[str, Any]) -> None:
        """Grant or change a user's access level (Reader to PublicReader)."""
        ensure_uuid(brain_id, "brain_id")
        validated = validate_input(SetBrainAccess, access)
        await self._send("POST", f"/brain-access/{brain_id}", params=validated.to_api())

    async def remove_brain_access(self, brain_id: str, access: RemoveBrainAccess | dict[str, Any]) -> None:
        ensure_uuid(brain_id, "brain_id")
        validated = validate_input(RemoveBrainAccess, access)
        await self._send("DELETE", f"/brain-access/{brain_id}", params=validated.to_api())


__all__ = ["BrainAccessClient"]
