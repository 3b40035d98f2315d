"""
Preset Repository Port - Interface for preset persistence.
Implementations:
- aistudio/infrastructure/persistence/prisma_preset_repository.py
- aistudio/infrastructure/persistence/memory/preset_repository.py
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from aistudio.domain.entities.preset import Preset
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.workspace_id import WorkspaceId


@dataclass(frozen=True)
class PresetFilter:
    """
    Query options for PresetRepository.list.

    Workspace selection, first match wins:
    - system_only: presets with no workspace
    - workspace_id + include_system_presets:
        workspace_id == W OR (no workspace AND is_public)
    - workspace_id: workspace_id == W
    - neither: any workspace
    category and is_public are ANDed on top. Results are ordered by
    usage_count desc, then created_at desc.
    """

    workspace_id: Optional[WorkspaceId] = None
    system_only: bool = False
    category: Optional[str] = None
    is_public: Optional[bool] = None
    include_system_presets: bool = False
    limit: Optional[int] = None
    offset: Optional[int] = None


class PresetRepository(ABC):
    @abstractmethod
    async def save(self, preset: Preset) -> Preset: ...

    @abstractmethod
    async def find_by_id(self, preset_id: PresetId) -> Optional[Preset]: ...

    @abstractmethod
    async def list(self, filter: Optional[PresetFilter] = None) -> list[Preset]: ...

    async def find_by_workspace_id(self, workspace_id: WorkspaceId) -> list[Preset]:
        """Workspace presets plus public system presets."""
        return await self.list(
            PresetFilter(workspace_id=workspace_id, include_system_presets=True)
        )

    async def find_by_category(
        self, category: str, workspace_id: Optional[WorkspaceId] = None
    ) -> list[Preset]:
        return await self.list(
            PresetFilter(
                category=category,
                workspace_id=workspace_id,
                include_system_presets=workspace_id is not None,
            )
        )

    async def find_system_presets(self) -> list[Preset]:
        """Public presets with no owning workspace."""
        return await self.list(PresetFilter(system_only=True, is_public=True))

    @abstractmethod
    async def increment_usage_count(self, preset_id: PresetId) -> None:
        """Add one to usage_count atomically in storage (no read-modify-write)."""
        ...

    @abstractmethod
    async def delete(self, preset_id: PresetId) -> None: ...
