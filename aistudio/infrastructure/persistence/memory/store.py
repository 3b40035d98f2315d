"""
In-memory storage shared by the in-memory repositories.

Plays the role of the database for the "memory" persistence backend and for
tests: one store per container, repositories are thin views over it.
Foreign keys are enforced the way the SQL schema enforces them.
"""

import asyncio
import copy
from typing import Iterable, TypeVar

from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.entities.message import Message
from aistudio.domain.entities.preset import Preset
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.message_id import MessageId
from aistudio.domain.value_objects.preset_id import PresetId
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId

E = TypeVar("E")


def detached(entity: E) -> E:
    """Copy an entity so callers never share state with the store."""
    return copy.deepcopy(entity)


class InMemoryStore:
    def __init__(
        self,
        workspaces: Iterable[WorkspaceId] = (),
        users: Iterable[UserId] = (),
    ):
        self.workspaces: set[WorkspaceId] = set(workspaces)
        self.users: set[UserId] = set(users)
        self.conversations: dict[ConversationId, Conversation] = {}
        self.messages: dict[MessageId, Message] = {}
        self.presets: dict[PresetId, Preset] = {}
        # Guards read-modify-write sequences such as counter increments
        self.lock = asyncio.Lock()

    def add_workspace(self, workspace_id: WorkspaceId) -> None:
        self.workspaces.add(workspace_id)

    def add_user(self, user_id: UserId) -> None:
        self.users.add(user_id)
