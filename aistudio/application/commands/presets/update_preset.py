"""Update Preset Command - partial update of a workspace preset."""

from typing import Any, Optional

from aistudio.application.common.fields import IdStr, NonBlankStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.preset import SYSTEM_PRESET_UPDATE_MESSAGE, Preset
from aistudio.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    ProtectedResourceError,
)
from aistudio.domain.ports.repositories import PresetRepository
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

UPDATABLE_FIELDS = (
    "name",
    "description",
    "category",
    "template",
    "model",
    "parameters",
    "is_public",
)


class UpdatePresetCommand(Command[Preset]):
    id: IdStr
    # Caller's workspace; when given, the preset must belong to it
    workspace_id: Optional[IdStr] = None
    name: Optional[NonBlankStr] = None
    description: Optional[NonBlankStr] = None
    category: Optional[NonBlankStr] = None
    template: Optional[NonBlankStr] = None
    model: Optional[NonBlankStr] = None
    parameters: Optional[dict[str, Any]] = None
    is_public: Optional[bool] = None

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually supplied."""
        return {
            name: getattr(self, name)
            for name in UPDATABLE_FIELDS
            if name in self.model_fields_set and getattr(self, name) is not None
        }


class UpdatePresetUseCase(UseCase[Preset]):
    def __init__(self, preset_repository: PresetRepository):
        self._preset_repository = preset_repository

    async def execute(self, command: UpdatePresetCommand) -> Preset:
        preset = await self._preset_repository.find_by_id(PresetId(command.id))
        if not preset:
            raise EntityNotFoundError("Preset not found")
        if preset.is_system_preset():
            raise ProtectedResourceError(SYSTEM_PRESET_UPDATE_MESSAGE)
        if command.workspace_id and not preset.belongs_to_workspace(
            WorkspaceId(command.workspace_id)
        ):
            raise AccessDeniedError("Access denied")

        preset.update(**command.changes())
        return await self._preset_repository.save(preset)
