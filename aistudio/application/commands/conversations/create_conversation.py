"""Create Conversation Command."""

import logging

from aistudio.application.common.fields import IdStr, NonBlankStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.exceptions import EntityNotFoundError
from aistudio.domain.ports.repositories import (
    ConversationRepository,
    UserRepository,
    WorkspaceRepository,
)
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

logger = logging.getLogger(__name__)


class CreateConversationCommand(Command[Conversation]):
    workspace_id: IdStr
    user_id: IdStr
    title: NonBlankStr
    model: NonBlankStr
    provider: NonBlankStr


class CreateConversationUseCase(UseCase[Conversation]):
    _conversation_repository: ConversationRepository

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        workspace_repository: WorkspaceRepository,
        user_repository: UserRepository,
    ):
        self._conversation_repository = conversation_repository
        self._workspace_repository = workspace_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateConversationCommand) -> Conversation:
        workspace_id = WorkspaceId(command.workspace_id)
        user_id = UserId(command.user_id)

        if not await self._workspace_repository.exists(workspace_id):
            raise EntityNotFoundError("Workspace not found")
        if not await self._user_repository.exists(user_id):
            raise EntityNotFoundError("User not found")

        conversation = Conversation.create(
            workspace_id=workspace_id,
            user_id=user_id,
            title=command.title,
            model=command.model,
            provider=command.provider,
        )
        saved = await self._conversation_repository.save(conversation)
        logger.info(f"Created conversation {saved.id} in workspace {workspace_id}")
        return saved
