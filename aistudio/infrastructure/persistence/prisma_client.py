"""
Prisma client lifecycle and the Prisma-backed adapter family.

The client is generated from prisma/schema.prisma by `prisma generate`; it is
only imported when the "prisma" persistence backend is selected.
"""

import logging
from typing import Optional

from prisma import Prisma

from aistudio.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from aistudio.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from aistudio.infrastructure.persistence.prisma_preset_repository import (
    PrismaPresetRepository,
)
from aistudio.infrastructure.persistence.prisma_directory_repositories import (
    PrismaUserRepository,
    PrismaWorkspaceRepository,
)

logger = logging.getLogger(__name__)


class PrismaAdapters:
    """Builds Prisma repositories that all share one client (one connection pool)."""

    def __init__(self, prisma: Optional[Prisma] = None):
        self.prisma = prisma or Prisma()

    def conversation_repository(self) -> PrismaConversationRepository:
        return PrismaConversationRepository(self.prisma)

    def message_repository(self) -> PrismaMessageRepository:
        return PrismaMessageRepository(self.prisma)

    def preset_repository(self) -> PrismaPresetRepository:
        return PrismaPresetRepository(self.prisma)

    def workspace_repository(self) -> PrismaWorkspaceRepository:
        return PrismaWorkspaceRepository(self.prisma)

    def user_repository(self) -> PrismaUserRepository:
        return PrismaUserRepository(self.prisma)

    async def connect(self) -> None:
        if not self.prisma.is_connected():
            await self.prisma.connect()
            logger.info("Prisma client connected")

    async def disconnect(self) -> None:
        if self.prisma.is_connected():
            await self.prisma.disconnect()
            logger.info("Prisma client disconnected")
