"""In-memory existence checks for workspaces and users."""

from aistudio.domain.ports.repositories import UserRepository, WorkspaceRepository
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId
from aistudio.infrastructure.persistence.memory.store import InMemoryStore


class InMemoryWorkspaceRepository(WorkspaceRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def exists(self, workspace_id: WorkspaceId) -> bool:
        return workspace_id in self._store.workspaces


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def exists(self, user_id: UserId) -> bool:
        return user_id in self._store.users
