"""Conversation DTOs for API request/response."""

from datetime import datetime

from pydantic import BaseModel

from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.ports.repositories import ConversationPage


class ConversationDTO(BaseModel):
    id: str
    workspace_id: str
    user_id: str
    title: str
    model: str
    provider: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=str(conversation.id),
            workspace_id=str(conversation.workspace_id),
            user_id=str(conversation.user_id),
            title=conversation.title,
            model=conversation.model,
            provider=conversation.provider,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )


class ConversationListDTO(BaseModel):
    conversations: list[ConversationDTO]
    total: int
    has_more: bool = False

    @classmethod
    def from_page(cls, page: ConversationPage) -> "ConversationListDTO":
        return cls(
            conversations=[ConversationDTO.from_entity(c) for c in page.items],
            total=page.total,
            has_more=page.has_more,
        )
