"""
PresetScope Value Object - who owns a preset.

A preset is either scoped to one workspace or is a system preset with no
owning workspace. System presets are read-only through the normal mutation
paths, so the two cases are modelled as distinct types instead of a nullable
workspace id.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from aistudio.domain.value_objects.workspace_id import WorkspaceId


@dataclass(frozen=True)
class WorkspaceScope:
    workspace_id: WorkspaceId


@dataclass(frozen=True)
class SystemScope:
    pass


PresetScope = Union[WorkspaceScope, SystemScope]


def scope_for(workspace_id: Optional[WorkspaceId]) -> PresetScope:
    """Build the scope matching an optional owning workspace."""
    if workspace_id is None:
        return SystemScope()
    return WorkspaceScope(workspace_id)
