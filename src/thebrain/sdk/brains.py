"""Brain-level operations: listing, creation, deletion, statistics and
modification history."""

from __future__ import annotations

from typing import Optional

from .base import ResourceClient, build_params
from .models import Brain, BrainStatistics, ModificationLog
from .validation import ensure_uuid


class BrainsClient(ResourceClient):
    async def get_brains(self) -> list[Brain]:
        """List the brains accessible to the authenticated user."""
        return await self._get_json("/brains", list[Brain])

    async def get_brain(self, brain_id: str) -> Brain:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/brains/{brain_id}", Brain)

    async def create_brain(self, brain_name: str) -> list[Brain]:
        """Create a brain owned by the authenticated user.

        The name is sent as the multipart form field ``brainName``; httpx
        sets the ``multipart/form-data`` content type and its boundary.
        """
        return await self._request_json(
            "POST",
            "/brains",
            list[Brain],
            files={"brainName": (None, brain_name)},
        )

    async def delete_brain(self, brain_id: str) -> None:
        ensure_uuid(brain_id, "brain_id")
        await self._send("DELETE", f"/brains/{brain_id}")

    async def get_brain_stats(self, brain_id: str) -> BrainStatistics:
        ensure_uuid(brain_id, "brain_id")
        return await self._get_json(f"/brains/{brain_id}/statistics", BrainStatistics)

    async def get_brain_modifications(
        self,
        brain_id: str,
        max_logs: int = 100,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> list[ModificationLog]:
        """Modification logs for a brain, optionally bounded by time.

        Args:
            brain_id: Brain identifier.
            max_logs: Maximum number of records to return.
            start_time: ISO-8601 lower bound.
            end_time: ISO-8601 upper bound.
        """
        ensure_uuid(brain_id, "brain_id")
        params = build_params(maxLogs=max_logs, startTime=start_time, endTime=end_time)
        return await self._get_json(f"/brains/{brain_id}/modifications", list[ModificationLog], params)


__all__ = ["BrainsClient"]
