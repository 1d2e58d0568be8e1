"""User endpoints."""

from __future__ import annotations

from .base import ResourceClient
from .models import User


class UsersClient(ResourceClient):
    async def get_organization_members(self) -> list[User]:
        """Members of the active user's organization."""
        return await self._get_json("/users/organization", list[User])


__all__ = ["UsersClient"]
