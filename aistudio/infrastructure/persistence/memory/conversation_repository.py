"""In-memory ConversationRepository."""

from __future__ import annotations
from typing import Optional

from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.exceptions import PersistenceConstraintError
from aistudio.domain.ports.repositories import ConversationFilter, ConversationRepository
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId
from aistudio.infrastructure.persistence.memory.store import InMemoryStore, detached


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _matching(self, filter: Optional[ConversationFilter]) -> list[Conversation]:
        filter = filter or ConversationFilter()
        rows = [
            (position, c)
            for position, c in enumerate(self._store.conversations.values())
            if (filter.workspace_id is None or c.workspace_id == filter.workspace_id)
            and (filter.user_id is None or c.user_id == filter.user_id)
        ]
        # Insertion order breaks created_at ties, latest first
        rows.sort(key=lambda row: (row[1].created_at, row[0]), reverse=True)
        return [c for _, c in rows]

    async def save(self, conversation: Conversation) -> Conversation:
        stored = self._store.conversations.get(conversation.id)
        if stored:
            # Only the title is mutable after creation
            stored.title = conversation.title
            stored.updated_at = conversation.updated_at
            return detached(stored)

        if (
            conversation.workspace_id not in self._store.workspaces
            or conversation.user_id not in self._store.users
        ):
            raise PersistenceConstraintError("Workspace or user does not exist")
        self._store.conversations[conversation.id] = detached(conversation)
        return detached(conversation)

    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        stored = self._store.conversations.get(conversation_id)
        return detached(stored) if stored else None

    async def find_by_workspace_id(
        self, workspace_id: WorkspaceId
    ) -> list[Conversation]:
        return await self.list(ConversationFilter(workspace_id=workspace_id))

    async def find_by_user_id(self, user_id: UserId) -> list[Conversation]:
        return await self.list(ConversationFilter(user_id=user_id))

    async def list(
        self, filter: Optional[ConversationFilter] = None
    ) -> list[Conversation]:
        rows = self._matching(filter)
        offset = (filter.offset if filter else None) or 0
        limit = filter.limit if filter else None
        rows = rows[offset:] if limit is None else rows[offset : offset + limit]
        return [detached(c) for c in rows]

    async def count(self, filter: Optional[ConversationFilter] = None) -> int:
        return len(self._matching(filter))

    async def delete(self, conversation_id: ConversationId) -> None:
        self._store.conversations.pop(conversation_id, None)
        # ON DELETE CASCADE from messages
        orphans = [
            message_id
            for message_id, m in self._store.messages.items()
            if m.conversation_id == conversation_id
        ]
        for message_id in orphans:
            del self._store.messages[message_id]
