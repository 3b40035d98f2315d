"""
Delete Conversation Command.

Messages are removed first, then the conversation. The two calls are not
wrapped in a transaction: if the second one fails the conversation is left
without messages, and repeating the command finishes the job.
"""

import logging

from aistudio.application.common.fields import IdStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.exceptions import AccessDeniedError, EntityNotFoundError
from aistudio.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class DeleteConversationCommand(Command[None]):
    conversation_id: IdStr
    user_id: IdStr


class DeleteConversationUseCase(UseCase[None]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository

    async def execute(self, command: DeleteConversationCommand) -> None:
        conversation_id = ConversationId(command.conversation_id)

        conversation = await self._conversation_repository.find_by_id(conversation_id)
        if not conversation:
            raise EntityNotFoundError("Conversation not found")
        if not conversation.is_owned_by(UserId(command.user_id)):
            raise AccessDeniedError("Unauthorized")

        await self._message_repository.delete_by_conversation_id(conversation_id)
        await self._conversation_repository.delete(conversation_id)
        logger.info(f"Deleted conversation {conversation_id} and its messages")
