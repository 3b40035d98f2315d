"""Conversation-related queries."""

from aistudio.application.queries.conversations.get_conversation import (
    ConversationWithMessages,
    GetConversationCommand,
    GetConversationUseCase,
)
from aistudio.application.queries.conversations.list_conversations import (
    ListConversationsCommand,
    ListConversationsUseCase,
)

__all__ = [
    "ConversationWithMessages",
    "GetConversationCommand",
    "GetConversationUseCase",
    "ListConversationsCommand",
    "ListConversationsUseCase",
]
