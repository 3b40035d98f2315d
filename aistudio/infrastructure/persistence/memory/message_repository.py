"""In-memory MessageRepository."""

from __future__ import annotations
from typing import Optional

from aistudio.domain.entities.message import Message
from aistudio.domain.exceptions import PersistenceConstraintError
from aistudio.domain.ports.repositories import MessageRepository, NewMessage
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.message_id import MessageId
from aistudio.infrastructure.persistence.memory.store import InMemoryStore


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _insert(self, message: Message) -> Message:
        if message.conversation_id not in self._store.conversations:
            raise PersistenceConstraintError("Conversation does not exist")
        self._store.messages[message.id] = message
        return message

    async def create(self, data: NewMessage) -> Message:
        message = Message.create(
            conversation_id=data.conversation_id,
            role=data.role,
            content=data.content,
            tokens=data.tokens,
            credits=data.credits,
        )
        return self._insert(message)

    async def save(self, message: Message) -> Message:
        stored = self._store.messages.get(message.id)
        if stored:
            # Messages are immutable, keep what is stored
            return stored
        return self._insert(message)

    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        return self._store.messages.get(message_id)

    async def find_by_conversation_id(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        # sorted() is stable: equal timestamps keep insertion order
        return sorted(
            (
                m
                for m in self._store.messages.values()
                if m.conversation_id == conversation_id
            ),
            key=lambda m: m.created_at,
        )

    async def delete_by_conversation_id(self, conversation_id: ConversationId) -> None:
        doomed = [
            m.id
            for m in self._store.messages.values()
            if m.conversation_id == conversation_id
        ]
        for message_id in doomed:
            del self._store.messages[message_id]

    async def delete(self, message_id: MessageId) -> None:
        self._store.messages.pop(message_id, None)
