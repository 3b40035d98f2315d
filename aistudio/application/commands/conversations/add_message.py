"""
AddMessage Command - Append one turn to an existing conversation.

The caller (the AI generation flow) has already produced the content and
its token/credit cost; this only records it.
"""

from aistudio.application.common.fields import IdStr, NonBlankStr, NonNegativeInt
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.message import Message
from aistudio.domain.exceptions import EntityNotFoundError
from aistudio.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.message_role import MessageRole


class AddMessageCommand(Command[Message]):
    conversation_id: IdStr
    role: MessageRole
    content: NonBlankStr
    tokens: NonNegativeInt = 0
    credits: NonNegativeInt = 0


class AddMessageUseCase(UseCase[Message]):
    def __init__(
        self,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
    ):
        self._message_repository = message_repository
        self._conversation_repository = conversation_repository

    async def execute(self, command: AddMessageCommand) -> Message:
        conversation_id = ConversationId(command.conversation_id)

        conversation = await self._conversation_repository.find_by_id(conversation_id)
        if not conversation:
            raise EntityNotFoundError("Conversation not found")

        message = Message.create(
            conversation_id=conversation.id,
            role=command.role,
            content=command.content,
            tokens=command.tokens,
            credits=command.credits,
        )
        return await self._message_repository.save(message)
