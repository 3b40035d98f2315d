"""Conversation commands."""

from .create_conversation import CreateConversationCommand, CreateConversationUseCase
from .add_message import AddMessageCommand, AddMessageUseCase
from .delete_conversation import DeleteConversationCommand, DeleteConversationUseCase
from .update_title import UpdateConversationTitleCommand, UpdateConversationTitleUseCase

__all__ = [
    "CreateConversationCommand",
    "CreateConversationUseCase",
    "AddMessageCommand",
    "AddMessageUseCase",
    "DeleteConversationCommand",
    "DeleteConversationUseCase",
    "UpdateConversationTitleCommand",
    "UpdateConversationTitleUseCase",
]
