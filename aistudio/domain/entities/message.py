"""
Message Entity - A single turn in a conversation.

Messages are immutable once written; they are only ever created or deleted.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from aistudio.domain.exceptions import DomainValidationError
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.message_id import MessageId
from aistudio.domain.value_objects.message_role import MessageRole


@dataclass(frozen=True)
class Message:
    id: MessageId
    conversation_id: ConversationId
    role: MessageRole
    content: str
    created_at: datetime
    tokens: int = 0
    credits: int = 0

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        role: Union[MessageRole, str],
        content: str,
        tokens: int = 0,
        credits: int = 0,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        try:
            role = MessageRole(role)
        except ValueError:
            raise DomainValidationError(
                f"Invalid role: {role}. Must be one of {[r.value for r in MessageRole]}."
            )
        if not content or not content.strip():
            raise DomainValidationError("Message content is required")
        if tokens < 0:
            raise DomainValidationError("Tokens cannot be negative")
        if credits < 0:
            raise DomainValidationError("Credits cannot be negative")

        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            role=role,
            content=content,
            created_at=datetime.now(timezone.utc),
            tokens=tokens,
            credits=credits,
        )

    @classmethod
    def from_persistence(
        cls,
        id: MessageId,
        conversation_id: ConversationId,
        role: MessageRole,
        content: str,
        created_at: datetime,
        tokens: int = 0,
        credits: int = 0,
    ) -> Message:
        return cls(
            id=id,
            conversation_id=conversation_id,
            role=role,
            content=content,
            created_at=created_at,
            tokens=tokens,
            credits=credits,
        )
