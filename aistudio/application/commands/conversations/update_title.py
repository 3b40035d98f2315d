"""Update Conversation Title Command."""

from aistudio.application.common.fields import IdStr, NonBlankStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.exceptions import AccessDeniedError, EntityNotFoundError
from aistudio.domain.ports.repositories import ConversationRepository
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.user_id import UserId


class UpdateConversationTitleCommand(Command[Conversation]):
    conversation_id: IdStr
    user_id: IdStr
    title: NonBlankStr


class UpdateConversationTitleUseCase(UseCase[Conversation]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: UpdateConversationTitleCommand) -> Conversation:
        conversation = await self._conversation_repository.find_by_id(
            ConversationId(command.conversation_id)
        )
        if not conversation:
            raise EntityNotFoundError("Conversation not found")
        if not conversation.is_owned_by(UserId(command.user_id)):
            raise AccessDeniedError("Unauthorized")

        conversation.update_title(command.title)
        return await self._conversation_repository.save(conversation)
