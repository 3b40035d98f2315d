"""
Preset Entity - A reusable generation template (prompt + model + parameters).

A preset created without a workspace is a system preset: shared by every
workspace when public, and never modified or deleted through the normal
mutation paths.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from aistudio.domain.exceptions import DomainValidationError, ProtectedResourceError
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.preset_scope import (
    PresetScope,
    SystemScope,
    WorkspaceScope,
    scope_for,
)
from aistudio.domain.value_objects.workspace_id import WorkspaceId

SYSTEM_PRESET_UPDATE_MESSAGE = "System presets cannot be modified"
SYSTEM_PRESET_DELETE_MESSAGE = "System presets cannot be deleted"


def _required(value: Optional[str], label: str) -> str:
    if value is None or not value.strip():
        raise DomainValidationError(f"{label} is required")
    return value.strip()


def _not_blank(value: str, label: str) -> str:
    if not value.strip():
        raise DomainValidationError(f"{label} cannot be empty")
    return value.strip()


@dataclass
class Preset:
    id: PresetId
    scope: PresetScope
    name: str
    description: str
    category: str
    template: str
    model: str
    created_at: datetime
    updated_at: datetime
    parameters: dict[str, Any] = field(default_factory=dict)
    is_public: bool = False
    usage_count: int = 0

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        category: str,
        template: str,
        model: str,
        workspace_id: Optional[WorkspaceId] = None,
        parameters: Optional[dict[str, Any]] = None,
        is_public: bool = False,
    ) -> Preset:
        """Factory method. Omitting workspace_id creates a system preset."""
        name = _required(name, "Preset name")
        description = _required(description, "Preset description")
        category = _required(category, "Preset category")
        template = _required(template, "Preset template")
        _required(model, "Model")

        now = datetime.now(timezone.utc)
        return cls(
            id=PresetId.generate(),
            scope=scope_for(workspace_id),
            name=name,
            description=description,
            category=category,
            template=template,
            model=model,
            created_at=now,
            updated_at=now,
            parameters=dict(parameters or {}),
            is_public=is_public,
            usage_count=0,
        )

    @classmethod
    def from_persistence(
        cls,
        id: PresetId,
        workspace_id: Optional[WorkspaceId],
        name: str,
        description: str,
        category: str,
        template: str,
        model: str,
        parameters: dict[str, Any],
        is_public: bool,
        usage_count: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> Preset:
        return cls(
            id=id,
            scope=scope_for(workspace_id),
            name=name,
            description=description,
            category=category,
            template=template,
            model=model,
            created_at=created_at,
            updated_at=updated_at,
            parameters=parameters,
            is_public=is_public,
            usage_count=usage_count,
        )

    @property
    def workspace_id(self) -> Optional[WorkspaceId]:
        if isinstance(self.scope, WorkspaceScope):
            return self.scope.workspace_id
        return None

    def is_system_preset(self) -> bool:
        if isinstance(self.scope, SystemScope):
            return True
        if isinstance(self.scope, WorkspaceScope):
            return False
        raise TypeError(f"Unknown preset scope: {self.scope!r}")

    def belongs_to_workspace(self, workspace_id: WorkspaceId) -> bool:
        return self.workspace_id == workspace_id

    def is_accessible_to_workspace(self, workspace_id: WorkspaceId) -> bool:
        # Public system presets are visible to every workspace
        if self.is_system_preset():
            return self.is_public
        return self.belongs_to_workspace(workspace_id)

    def update(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        template: Optional[str] = None,
        model: Optional[str] = None,
        parameters: Optional[dict[str, Any]] = None,
        is_public: Optional[bool] = None,
    ) -> None:
        """Apply a partial update. None leaves a field untouched."""
        if self.is_system_preset():
            raise ProtectedResourceError(SYSTEM_PRESET_UPDATE_MESSAGE)

        # Validate everything before touching state so a bad field changes nothing
        if name is not None:
            name = _not_blank(name, "Preset name")
        if description is not None:
            description = _not_blank(description, "Preset description")
        if category is not None:
            category = _not_blank(category, "Preset category")
        if template is not None:
            template = _not_blank(template, "Preset template")
        if model is not None:
            _not_blank(model, "Model")

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if category is not None:
            self.category = category
        if template is not None:
            self.template = template
        if model is not None:
            self.model = model
        if parameters is not None:
            self.parameters = dict(parameters)
        if is_public is not None:
            self.is_public = is_public

        self.updated_at = datetime.now(timezone.utc)

    def increment_usage_count(self) -> None:
        """Mirror a storage-side increment on this in-memory copy."""
        self.usage_count += 1
