"""
Create Preset Command.

Without a workspace_id the preset becomes a system preset (shared,
read-only afterwards).
"""

import logging
from typing import Any, Optional

from pydantic import Field

from aistudio.application.common.fields import IdStr, NonBlankStr
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.preset import Preset
from aistudio.domain.exceptions import EntityNotFoundError
from aistudio.domain.ports.repositories import PresetRepository, WorkspaceRepository
from aistudio.domain.value_objects.workspace_id import WorkspaceId

logger = logging.getLogger(__name__)


class CreatePresetCommand(Command[Preset]):
    workspace_id: Optional[IdStr] = None
    name: NonBlankStr
    description: NonBlankStr
    category: NonBlankStr
    template: NonBlankStr
    model: NonBlankStr
    parameters: dict[str, Any] = Field(default_factory=dict)
    is_public: bool = False


class CreatePresetUseCase(UseCase[Preset]):
    def __init__(
        self,
        preset_repository: PresetRepository,
        workspace_repository: WorkspaceRepository,
    ):
        self._preset_repository = preset_repository
        self._workspace_repository = workspace_repository

    async def execute(self, command: CreatePresetCommand) -> Preset:
        workspace_id = None
        if command.workspace_id:
            workspace_id = WorkspaceId(command.workspace_id)
            if not await self._workspace_repository.exists(workspace_id):
                raise EntityNotFoundError("Workspace not found")

        preset = Preset.create(
            workspace_id=workspace_id,
            name=command.name,
            description=command.description,
            category=command.category,
            template=command.template,
            model=command.model,
            parameters=command.parameters,
            is_public=command.is_public,
        )
        saved = await self._preset_repository.save(preset)
        scope = "system" if saved.is_system_preset() else f"workspace {workspace_id}"
        logger.info(f"Created preset {saved.id} ({saved.name}) for {scope}")
        return saved
