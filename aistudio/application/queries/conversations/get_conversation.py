"""
GetConversation Query - Get a conversation with its messages.

Used by the chat window to load a conversation's full history when it is
opened.
"""

from dataclasses import dataclass, field

from aistudio.application.common.fields import IdStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.entities.message import Message
from aistudio.domain.exceptions import AccessDeniedError, EntityNotFoundError
from aistudio.domain.ports.repositories import ConversationRepository, MessageRepository
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.user_id import UserId


@dataclass
class ConversationWithMessages:
    """Result containing conversation metadata and messages."""

    conversation: Conversation
    messages: list[Message] = field(default_factory=list)


class GetConversationCommand(Command[ConversationWithMessages]):
    conversation_id: IdStr
    user_id: IdStr


class GetConversationUseCase(UseCase[ConversationWithMessages]):
    """
    Returns conversation metadata + messages in creation order.
    """

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository

    async def execute(self, command: GetConversationCommand) -> ConversationWithMessages:
        """
        Steps:
        1. Verify conversation exists
        2. Verify user owns conversation
        3. Load messages, oldest first

        Raises:
            EntityNotFoundError: If conversation doesn't exist
            AccessDeniedError: If user doesn't own the conversation
        """
        conversation_id = ConversationId(command.conversation_id)

        conversation = await self._conversation_repository.find_by_id(conversation_id)
        if not conversation:
            raise EntityNotFoundError("Conversation not found")

        if not conversation.is_owned_by(UserId(command.user_id)):
            raise AccessDeniedError("Unauthorized")

        messages = await self._message_repository.find_by_conversation_id(
            conversation_id
        )
        return ConversationWithMessages(conversation=conversation, messages=messages)
