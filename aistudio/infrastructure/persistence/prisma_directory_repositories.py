"""
Prisma lookups for the workspace and user directories.

Workspaces and users are owned by other parts of the platform; this core only
needs to know whether a referenced id exists.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from aistudio.domain.ports.repositories import UserRepository, WorkspaceRepository
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaWorkspaceRepository(WorkspaceRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def exists(self, workspace_id: WorkspaceId) -> bool:
        record = await self._prisma.workspace.find_unique(
            where={"id": workspace_id.value}
        )
        return record is not None


class PrismaUserRepository(UserRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def exists(self, user_id: UserId) -> bool:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return record is not None
