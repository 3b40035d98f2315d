"""
Workspace Repository Port - Read-only view of the external workspace aggregate.
Workspaces are created and managed elsewhere; this core only checks that
one exists before attaching conversations or presets to it.
"""

from abc import ABC, abstractmethod

from aistudio.domain.value_objects.workspace_id import WorkspaceId


class WorkspaceRepository(ABC):
    @abstractmethod
    async def exists(self, workspace_id: WorkspaceId) -> bool: ...
