"""
WorkspaceId Value Object - identity of the owning tenant.
"""

from dataclasses import dataclass

from aistudio.domain.value_objects.id import Id


@dataclass(frozen=True)
class WorkspaceId(Id):
    pass
