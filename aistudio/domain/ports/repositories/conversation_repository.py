"""
Conversation Repository Port - Interface for conversation persistence.
Implementations:
- aistudio/infrastructure/persistence/prisma_conversation_repository.py
- aistudio/infrastructure/persistence/memory/conversation_repository.py
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class ConversationFilter:
    workspace_id: Optional[WorkspaceId] = None
    user_id: Optional[UserId] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass
class ConversationPage:
    items: list[Conversation] = field(default_factory=list)
    total: int = 0
    has_more: bool = False


class ConversationRepository(ABC):
    @abstractmethod
    async def save(self, conversation: Conversation) -> Conversation:
        """Create or update. Returns the stored conversation."""
        ...

    @abstractmethod
    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def find_by_workspace_id(
        self, workspace_id: WorkspaceId
    ) -> list[Conversation]: ...

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> list[Conversation]: ...

    @abstractmethod
    async def list(
        self, filter: Optional[ConversationFilter] = None
    ) -> list[Conversation]:
        """Newest first (created_at desc), then offset/limit."""
        ...

    @abstractmethod
    async def count(self, filter: Optional[ConversationFilter] = None) -> int:
        """Count matches, ignoring limit/offset."""
        ...

    async def list_with_pagination(
        self, filter: Optional[ConversationFilter] = None
    ) -> ConversationPage:
        filter = filter or ConversationFilter()
        limit = filter.limit if filter.limit is not None else DEFAULT_PAGE_SIZE
        offset = filter.offset or 0
        page_filter = ConversationFilter(
            workspace_id=filter.workspace_id,
            user_id=filter.user_id,
            limit=limit,
            offset=offset,
        )
        items = await self.list(page_filter)
        total = await self.count(page_filter)
        return ConversationPage(
            items=items,
            total=total,
            has_more=offset + len(items) < total,
        )

    @abstractmethod
    async def delete(self, conversation_id: ConversationId) -> None:
        """Delete by ID. Deleting a missing conversation is a no-op."""
        ...
