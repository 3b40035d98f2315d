"""
Message Repository Port - Interface for message persistence.
Implementations:
- aistudio/infrastructure/persistence/prisma_message_repository.py
- aistudio/infrastructure/persistence/memory/message_repository.py
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from aistudio.domain.entities.message import Message
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.message_id import MessageId
from aistudio.domain.value_objects.message_role import MessageRole


@dataclass(frozen=True)
class NewMessage:
    conversation_id: ConversationId
    role: MessageRole
    content: str
    tokens: int = 0
    credits: int = 0


class MessageRepository(ABC):
    @abstractmethod
    async def create(self, data: NewMessage) -> Message:
        """Persist a new message built from raw data; storage assigns the ID."""
        ...

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Persist a message entity. Messages are immutable: saving an
        existing ID returns the stored copy unchanged."""
        ...

    @abstractmethod
    async def find_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def find_by_conversation_id(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """All messages of a conversation in creation order (oldest first)."""
        ...

    @abstractmethod
    async def delete_by_conversation_id(
        self, conversation_id: ConversationId
    ) -> None: ...

    @abstractmethod
    async def delete(self, message_id: MessageId) -> None: ...
