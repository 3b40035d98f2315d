"""List Conversations Query."""

from typing import Optional

from aistudio.application.common.fields import IdStr, NonNegativeInt
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.config.settings import Config
from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.ports.repositories import (
    ConversationFilter,
    ConversationRepository,
)
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId


class ListConversationsCommand(Command[list[Conversation]]):
    workspace_id: Optional[IdStr] = None
    user_id: Optional[IdStr] = None
    limit: NonNegativeInt = Config.CONVERSATION_PAGE_SIZE
    offset: NonNegativeInt = 0


class ListConversationsUseCase(UseCase[list[Conversation]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: ListConversationsCommand) -> list[Conversation]:
        return await self._conversation_repository.list(
            ConversationFilter(
                workspace_id=WorkspaceId(command.workspace_id)
                if command.workspace_id
                else None,
                user_id=UserId(command.user_id) if command.user_id else None,
                limit=command.limit,
                offset=command.offset,
            )
        )
