"""
GetPreset Query - Fetch one preset for use.

Fetching a preset counts as using it: usage_count is incremented once per
call, atomically in storage.
"""

from typing import Optional

from aistudio.application.common.fields import IdStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.preset import Preset
from aistudio.domain.exceptions import AccessDeniedError, EntityNotFoundError
from aistudio.domain.ports.repositories import PresetRepository
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.workspace_id import WorkspaceId


class GetPresetCommand(Command[Preset]):
    id: IdStr
    workspace_id: Optional[IdStr] = None


class GetPresetUseCase(UseCase[Preset]):
    def __init__(self, preset_repository: PresetRepository):
        self._preset_repository = preset_repository

    async def execute(self, command: GetPresetCommand) -> Preset:
        preset_id = PresetId(command.id)

        preset = await self._preset_repository.find_by_id(preset_id)
        if not preset:
            raise EntityNotFoundError("Preset not found")

        if command.workspace_id and not preset.is_accessible_to_workspace(
            WorkspaceId(command.workspace_id)
        ):
            raise AccessDeniedError("Access denied")

        await self._preset_repository.increment_usage_count(preset_id)
        preset.increment_usage_count()
        return preset
