"""
Prisma Preset Repository Implementation.

Mapping:
- Prisma: workspace_id NULL ←→ Domain: SystemScope
- Prisma: parameters Json ←→ Domain: dict
- usage_count is only written by increment_usage_count, using prisma's
  atomic {"increment": 1} update so concurrent reads never lose a count.
"""

from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any, Optional

from prisma import Json
from prisma.errors import ForeignKeyViolationError

from aistudio.domain.entities.preset import Preset
from aistudio.domain.exceptions import PersistenceConstraintError
from aistudio.domain.ports.repositories import PresetFilter, PresetRepository
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


def _where(filter: PresetFilter) -> dict[str, Any]:
    """Translate a PresetFilter into a prisma where clause."""
    where: dict[str, Any] = {}
    if filter.system_only:
        where["workspace_id"] = None
    elif filter.workspace_id is not None and filter.include_system_presets:
        where["OR"] = [
            {"workspace_id": filter.workspace_id.value},
            {"workspace_id": None, "is_public": True},
        ]
    elif filter.workspace_id is not None:
        where["workspace_id"] = filter.workspace_id.value

    if filter.category is not None:
        where["category"] = filter.category
    if filter.is_public is not None:
        where["is_public"] = filter.is_public
    return where


class PrismaPresetRepository(PresetRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record) -> Preset:
        """Map Prisma record to domain entity."""
        parameters = record.parameters
        if isinstance(parameters, str):
            parameters = json.loads(parameters)

        return Preset.from_persistence(
            id=PresetId(record.id),
            workspace_id=WorkspaceId(record.workspace_id) if record.workspace_id else None,
            name=record.name,
            description=record.description,
            category=record.category,
            template=record.template,
            model=record.model,
            parameters=parameters or {},
            is_public=record.is_public,
            usage_count=record.usage_count,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def save(self, preset: Preset) -> Preset:
        """Create or update a preset. Scope and usage_count are fixed once stored."""
        workspace_id = preset.workspace_id
        try:
            record = await self._prisma.preset.upsert(
                where={"id": preset.id.value},
                data={
                    "create": {
                        "id": preset.id.value,
                        "workspace_id": workspace_id.value if workspace_id else None,
                        "name": preset.name,
                        "description": preset.description,
                        "category": preset.category,
                        "template": preset.template,
                        "model": preset.model,
                        "parameters": Json(preset.parameters),
                        "is_public": preset.is_public,
                        "usage_count": preset.usage_count,
                        "created_at": preset.created_at,
                        "updated_at": preset.updated_at,
                    },
                    "update": {
                        "name": preset.name,
                        "description": preset.description,
                        "category": preset.category,
                        "template": preset.template,
                        "model": preset.model,
                        "parameters": Json(preset.parameters),
                        "is_public": preset.is_public,
                        "updated_at": preset.updated_at,
                    },
                },
            )
        except ForeignKeyViolationError as e:
            logger.warning(f"Preset {preset.id} rejected by storage: {e}")
            raise PersistenceConstraintError("Workspace does not exist") from e
        return self._to_entity(record)

    async def find_by_id(self, preset_id: PresetId) -> Optional[Preset]:
        record = await self._prisma.preset.find_unique(where={"id": preset_id.value})
        return self._to_entity(record) if record else None

    async def list(self, filter: Optional[PresetFilter] = None) -> list[Preset]:
        filter = filter or PresetFilter()
        records = await self._prisma.preset.find_many(
            where=_where(filter),
            order=[{"usage_count": "desc"}, {"created_at": "desc"}],
            take=filter.limit,
            skip=filter.offset,
        )
        return [self._to_entity(record) for record in records]

    async def increment_usage_count(self, preset_id: PresetId) -> None:
        record = await self._prisma.preset.update(
            where={"id": preset_id.value},
            data={"usage_count": {"increment": 1}},
        )
        if record is None:
            # Preset deleted between the read and the increment
            logger.debug(f"Usage count not incremented, preset {preset_id} is gone")

    async def delete(self, preset_id: PresetId) -> None:
        await self._prisma.preset.delete(where={"id": preset_id.value})
