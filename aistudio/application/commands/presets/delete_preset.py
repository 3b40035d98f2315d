"""Delete Preset Command."""

import logging
from typing import Optional

from aistudio.application.common.fields import IdStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.preset import SYSTEM_PRESET_DELETE_MESSAGE
from aistudio.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    ProtectedResourceError,
)
from aistudio.domain.ports.repositories import PresetRepository
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

logger = logging.getLogger(__name__)


class DeletePresetCommand(Command[None]):
    id: IdStr
    workspace_id: Optional[IdStr] = None


class DeletePresetUseCase(UseCase[None]):
    def __init__(self, preset_repository: PresetRepository):
        self._preset_repository = preset_repository

    async def execute(self, command: DeletePresetCommand) -> None:
        preset_id = PresetId(command.id)

        preset = await self._preset_repository.find_by_id(preset_id)
        if not preset:
            raise EntityNotFoundError("Preset not found")
        if preset.is_system_preset():
            raise ProtectedResourceError(SYSTEM_PRESET_DELETE_MESSAGE)
        if command.workspace_id and not preset.belongs_to_workspace(
            WorkspaceId(command.workspace_id)
        ):
            raise AccessDeniedError("Access denied")

        await self._preset_repository.delete(preset_id)
        logger.info(f"Deleted preset {preset_id}")
