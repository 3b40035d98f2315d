"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from aistudio.domain.value_objects.id import Id
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.message_id import MessageId
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.message_role import MessageRole
from aistudio.domain.value_objects.preset_scope import (
    PresetScope,
    SystemScope,
    WorkspaceScope,
)

__all__ = [
    "Id",
    "UserId",
    "WorkspaceId",
    "ConversationId",
    "MessageId",
    "PresetId",
    "MessageRole",
    "PresetScope",
    "SystemScope",
    "WorkspaceScope",
]
