"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the use cases need
- Does NOT specify implementation (Prisma, in-memory, etc.)
- Returns None for "not found" instead of raising

Infrastructure layer provides implementations.
"""

from aistudio.domain.ports.repositories.conversation_repository import (
    ConversationFilter,
    ConversationPage,
    ConversationRepository,
)
from aistudio.domain.ports.repositories.message_repository import (
    MessageRepository,
    NewMessage,
)
from aistudio.domain.ports.repositories.preset_repository import (
    PresetFilter,
    PresetRepository,
)
from aistudio.domain.ports.repositories.workspace_repository import WorkspaceRepository
from aistudio.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "ConversationFilter",
    "ConversationPage",
    "ConversationRepository",
    "MessageRepository",
    "NewMessage",
    "PresetFilter",
    "PresetRepository",
    "WorkspaceRepository",
    "UserRepository",
]
