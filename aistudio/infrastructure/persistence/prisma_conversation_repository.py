"""
Prisma Conversation Repository Implementation.

- Implements ConversationRepository port from domain layer
- Maps between Prisma records and domain entities
- Translates foreign-key failures into PersistenceConstraintError

Mapping:
- Prisma model fields: id, workspace_id, user_id, title, model, provider,
  created_at, updated_at
- Domain entity: Conversation with value objects (ConversationId,
  WorkspaceId, UserId)
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Optional

from prisma.errors import ForeignKeyViolationError

from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.exceptions import PersistenceConstraintError
from aistudio.domain.ports.repositories import ConversationFilter, ConversationRepository
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation.from_persistence(
            id=ConversationId(record.id),
            workspace_id=WorkspaceId(record.workspace_id),
            user_id=UserId(record.user_id),
            title=record.title,
            model=record.model,
            provider=record.provider,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def _where(self, filter: Optional[ConversationFilter]) -> dict[str, Any]:
        where: dict[str, Any] = {}
        if filter and filter.workspace_id:
            where["workspace_id"] = filter.workspace_id.value
        if filter and filter.user_id:
            where["user_id"] = filter.user_id.value
        return where

    async def save(self, conversation: Conversation) -> Conversation:
        """Save (create or update) conversation."""
        try:
            record = await self._prisma.conversation.upsert(
                where={"id": conversation.id.value},
                data={
                    "create": {
                        "id": conversation.id.value,
                        "workspace_id": conversation.workspace_id.value,
                        "user_id": conversation.user_id.value,
                        "title": conversation.title,
                        "model": conversation.model,
                        "provider": conversation.provider,
                        "created_at": conversation.created_at,
                        "updated_at": conversation.updated_at,
                    },
                    "update": {
                        "title": conversation.title,
                        "updated_at": conversation.updated_at,
                    },
                },
            )
        except ForeignKeyViolationError as e:
            logger.warning(f"Conversation {conversation.id} rejected by storage: {e}")
            raise PersistenceConstraintError("Workspace or user does not exist") from e
        return self._to_entity(record)

    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Get conversation by ID."""
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value}
        )
        return self._to_entity(record) if record else None

    async def find_by_workspace_id(
        self, workspace_id: WorkspaceId
    ) -> list[Conversation]:
        return await self.list(ConversationFilter(workspace_id=workspace_id))

    async def find_by_user_id(self, user_id: UserId) -> list[Conversation]:
        return await self.list(ConversationFilter(user_id=user_id))

    async def list(
        self, filter: Optional[ConversationFilter] = None
    ) -> list[Conversation]:
        """Conversations matching the filter, newest first."""
        records = await self._prisma.conversation.find_many(
            where=self._where(filter),
            order={"created_at": "desc"},
            take=filter.limit if filter else None,
            skip=filter.offset if filter else None,
        )
        return [self._to_entity(record) for record in records]

    async def count(self, filter: Optional[ConversationFilter] = None) -> int:
        return await self._prisma.conversation.count(where=self._where(filter))

    async def delete(self, conversation_id: ConversationId) -> None:
        """Delete conversation by ID. prisma returns None when nothing matched."""
        await self._prisma.conversation.delete(where={"id": conversation_id.value})
