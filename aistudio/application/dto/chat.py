"""Chat DTOs for API request/response."""

from datetime import datetime

from pydantic import BaseModel

from aistudio.application.dto.conversation import ConversationDTO
from aistudio.application.queries.conversations.get_conversation import (
    ConversationWithMessages,
)
from aistudio.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: str
    conversation_id: str
    role: str
    content: str
    created_at: datetime
    tokens: int = 0
    credits: int = 0

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=str(message.id),
            conversation_id=str(message.conversation_id),
            role=message.role.value,
            content=message.content,
            created_at=message.created_at,
            tokens=message.tokens,
            credits=message.credits,
        )


class ConversationDetailDTO(BaseModel):
    conversation: ConversationDTO
    messages: list[MessageDTO]

    @classmethod
    def from_result(cls, result: ConversationWithMessages) -> "ConversationDetailDTO":
        return cls(
            conversation=ConversationDTO.from_entity(result.conversation),
            messages=[MessageDTO.from_entity(m) for m in result.messages],
        )
