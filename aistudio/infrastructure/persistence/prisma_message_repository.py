"""
Prisma Message Repository Implementation.

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id              String       @id @default(uuid())
        conversation_id String
        role            MessageRole
        content         String
        tokens          Int          @default(0)
        credits         Int          @default(0)
        created_at      DateTime     @default(now())
        conversation    Conversation @relation(...)
    }

Mapping:
- Prisma: role "USER" / "ASSISTANT" / "SYSTEM" ←→ Domain: MessageRole
- Prisma: id, conversation_id (str) ←→ Domain: MessageId, ConversationId
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional

from prisma.errors import ForeignKeyViolationError

from aistudio.domain.entities.message import Message
from aistudio.domain.exceptions import PersistenceConstraintError
from aistudio.domain.ports.repositories import MessageRepository, NewMessage
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.message_id import MessageId
from aistudio.domain.value_objects.message_role import MessageRole

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Args:
            prisma: Prisma client shared by every repository (injected by the container)
        """
        self._prisma = prisma

    def _to_entity(self, record) -> Message:
        """Map Prisma record to domain entity."""
        return Message.from_persistence(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            role=MessageRole(record.role.lower()),
            content=record.content,
            created_at=record.created_at,
            tokens=record.tokens,
            credits=record.credits,
        )

    async def _insert(self, data: dict) -> Message:
        try:
            record = await self._prisma.message.create(data=data)
        except ForeignKeyViolationError as e:
            logger.warning(f"Message for conversation {data['conversation_id']} rejected: {e}")
            raise PersistenceConstraintError("Conversation does not exist") from e
        return self._to_entity(record)

    async def create(self, data: NewMessage) -> Message:
        """
        Create a message from raw data. The database assigns id and created_at.
        """
        return await self._insert(
            {
                "conversation_id": data.conversation_id.value,
                "role": MessageRole(data.role).value.upper(),
                "content": data.content,
                "tokens": data.tokens,
                "credits": data.credits,
            }
        )

    async def save(self, message: Message) -> Message:
        """
        Persist a message entity.

        Messages are immutable, so an already stored message is returned as
        it is instead of being overwritten.
        """
        existing = await self._prisma.message.find_unique(where={"id": message.id.value})
        if existing:
            return self._to_entity(existing)

        return await self._insert(
            {
                "id": message.id.value,
                "conversation_id": message.conversation_id.value,
                "role": message.role.value.upper(),
                "content": message.content,
                "tokens": message.tokens,
                "credits": message.credits,
                "created_at": message.created_at,
            }
        )

    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        record = await self._prisma.message.find_unique(where={"id": message_id.value})
        return self._to_entity(record) if record else None

    async def find_by_conversation_id(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """All messages of a conversation, oldest first (chat display order)."""
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def delete_by_conversation_id(self, conversation_id: ConversationId) -> None:
        deleted = await self._prisma.message.delete_many(
            where={"conversation_id": conversation_id.value}
        )
        logger.debug(f"Deleted {deleted} messages of conversation {conversation_id}")

    async def delete(self, message_id: MessageId) -> None:
        await self._prisma.message.delete(where={"id": message_id.value})
