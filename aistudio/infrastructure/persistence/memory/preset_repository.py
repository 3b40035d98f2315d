"""In-memory PresetRepository."""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from aistudio.domain.entities.preset import Preset
from aistudio.domain.exceptions import PersistenceConstraintError
from aistudio.domain.ports.repositories import PresetFilter, PresetRepository
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.infrastructure.persistence.memory.store import InMemoryStore, detached


def _matches(preset: Preset, filter: PresetFilter) -> bool:
    if filter.system_only:
        in_scope = preset.is_system_preset()
    elif filter.workspace_id is not None and filter.include_system_presets:
        in_scope = preset.belongs_to_workspace(filter.workspace_id) or (
            preset.is_system_preset() and preset.is_public
        )
    elif filter.workspace_id is not None:
        in_scope = preset.belongs_to_workspace(filter.workspace_id)
    else:
        in_scope = True

    if not in_scope:
        return False
    if filter.category is not None and preset.category != filter.category:
        return False
    if filter.is_public is not None and preset.is_public != filter.is_public:
        return False
    return True


class InMemoryPresetRepository(PresetRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def save(self, preset: Preset) -> Preset:
        workspace_id = preset.workspace_id
        if workspace_id is not None and workspace_id not in self._store.workspaces:
            raise PersistenceConstraintError("Workspace does not exist")

        stored = self._store.presets.get(preset.id)
        if stored:
            # usage_count only moves through increment_usage_count
            preset = detached(preset)
            preset.scope = stored.scope
            preset.created_at = stored.created_at
            preset.usage_count = stored.usage_count
        self._store.presets[preset.id] = detached(preset)
        return detached(preset)

    async def find_by_id(self, preset_id: PresetId) -> Optional[Preset]:
        stored = self._store.presets.get(preset_id)
        return detached(stored) if stored else None

    async def list(self, filter: Optional[PresetFilter] = None) -> list[Preset]:
        filter = filter or PresetFilter()
        rows = [
            (position, p)
            for position, p in enumerate(self._store.presets.values())
            if _matches(p, filter)
        ]
        rows.sort(
            key=lambda row: (row[1].usage_count, row[1].created_at, row[0]),
            reverse=True,
        )
        presets = [p for _, p in rows]

        offset = filter.offset or 0
        if filter.limit is None:
            presets = presets[offset:]
        else:
            presets = presets[offset : offset + filter.limit]
        return [detached(p) for p in presets]

    async def increment_usage_count(self, preset_id: PresetId) -> None:
        async with self._store.lock:
            stored = self._store.presets.get(preset_id)
            if stored is None:
                return
            stored.usage_count += 1
            stored.updated_at = datetime.now(timezone.utc)

    async def delete(self, preset_id: PresetId) -> None:
        self._store.presets.pop(preset_id, None)
