"""Preset DTOs for API request/response."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from aistudio.domain.entities.preset import Preset


class PresetDTO(BaseModel):
    id: str
    workspace_id: Optional[str] = None
    name: str
    description: str
    category: str
    template: str
    model: str
    parameters: dict[str, Any]
    is_public: bool
    is_system: bool
    usage_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, preset: Preset) -> "PresetDTO":
        return cls(
            id=str(preset.id),
            workspace_id=str(preset.workspace_id) if preset.workspace_id else None,
            name=preset.name,
            description=preset.description,
            category=preset.category,
            template=preset.template,
            model=preset.model,
            parameters=preset.parameters,
            is_public=preset.is_public,
            is_system=preset.is_system_preset(),
            usage_count=preset.usage_count,
            created_at=preset.created_at,
            updated_at=preset.updated_at,
        )
