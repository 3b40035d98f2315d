"""
List Presets Query.

With include_system_presets and a workspace_id the result is the workspace's
own presets plus public system presets, most used first.
"""

from typing import Optional

from aistudio.application.common.fields import IdStr, NonBlankStr, NonNegativeInt
from aistudio.application.common.interfaces import Command, UseCase
from aistudio.domain.entities.preset import Preset
from aistudio.domain.ports.repositories import PresetFilter, PresetRepository
from aistudio.domain.value_objects.workspace_id import WorkspaceId


class ListPresetsCommand(Command[list[Preset]]):
    workspace_id: Optional[IdStr] = None
    category: Optional[NonBlankStr] = None
    is_public: Optional[bool] = None
    include_system_presets: bool = False
    limit: Optional[NonNegativeInt] = None
    offset: Optional[NonNegativeInt] = None


class ListPresetsUseCase(UseCase[list[Preset]]):
    def __init__(self, preset_repository: PresetRepository):
        self._preset_repository = preset_repository

    async def execute(self, command: ListPresetsCommand) -> list[Preset]:
        presets = await self._preset_repository.list(
            PresetFilter(
                workspace_id=WorkspaceId(command.workspace_id)
                if command.workspace_id
                else None,
                category=command.category,
                is_public=command.is_public,
                include_system_presets=command.include_system_presets,
                limit=command.limit,
                offset=command.offset,
            )
        )

        # Keep the repository's ordering, drop repeated ids
        seen = set()
        unique = []
        for preset in presets:
            if preset.id in seen:
                continue
            seen.add(preset.id)
            unique.append(preset)
        return unique
