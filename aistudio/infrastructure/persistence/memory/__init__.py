"""
In-memory persistence - a complete substitute for the Prisma adapters.

Used by the "memory" persistence backend (local runs, tests).
"""

from aistudio.infrastructure.persistence.memory.store import InMemoryStore
from aistudio.infrastructure.persistence.memory.conversation_repository import (
    InMemoryConversationRepository,
)
from aistudio.infrastructure.persistence.memory.message_repository import (
    InMemoryMessageRepository,
)
from aistudio.infrastructure.persistence.memory.preset_repository import (
    InMemoryPresetRepository,
)
from aistudio.infrastructure.persistence.memory.directory_repositories import (
    InMemoryUserRepository,
    InMemoryWorkspaceRepository,
)


class InMemoryAdapters:
    """Builds in-memory repositories that all share one store."""

    def __init__(self, store: InMemoryStore = None):
        self.store = store or InMemoryStore()

    def conversation_repository(self) -> InMemoryConversationRepository:
        return InMemoryConversationRepository(self.store)

    def message_repository(self) -> InMemoryMessageRepository:
        return InMemoryMessageRepository(self.store)

    def preset_repository(self) -> InMemoryPresetRepository:
        return InMemoryPresetRepository(self.store)

    def workspace_repository(self) -> InMemoryWorkspaceRepository:
        return InMemoryWorkspaceRepository(self.store)

    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository(self.store)

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass


__all__ = [
    "InMemoryAdapters",
    "InMemoryStore",
    "InMemoryConversationRepository",
    "InMemoryMessageRepository",
    "InMemoryPresetRepository",
    "InMemoryUserRepository",
    "InMemoryWorkspaceRepository",
]
