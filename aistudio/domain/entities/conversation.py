"""
Conversation Entity - A chat session between a user and a model.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from aistudio.domain.exceptions import DomainValidationError
from aistudio.domain.value_objects.conversation_id import ConversationId
from aistudio.domain.value_objects.user_id import UserId
from aistudio.domain.value_objects.workspace_id import WorkspaceId


@dataclass
class Conversation:
    id: ConversationId
    workspace_id: WorkspaceId
    user_id: UserId
    title: str
    model: str
    provider: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        workspace_id: WorkspaceId,
        user_id: UserId,
        title: str,
        model: str,
        provider: str,
    ) -> Conversation:
        """Factory method to create a new Conversation with a generated ID and timestamps."""
        if not title or not title.strip():
            raise DomainValidationError("Conversation title is required")
        if not model or not model.strip():
            raise DomainValidationError("Model is required")
        if not provider or not provider.strip():
            raise DomainValidationError("Provider is required")

        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            workspace_id=workspace_id,
            user_id=user_id,
            title=title.strip(),
            model=model,
            provider=provider,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_persistence(
        cls,
        id: ConversationId,
        workspace_id: WorkspaceId,
        user_id: UserId,
        title: str,
        model: str,
        provider: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Conversation:
        """Rebuild a stored conversation. Stored rows are trusted, nothing is re-validated."""
        return cls(
            id=id,
            workspace_id=workspace_id,
            user_id=user_id,
            title=title,
            model=model,
            provider=provider,
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_title(self, new_title: str) -> None:
        trimmed = (new_title or "").strip()
        if not trimmed:
            raise DomainValidationError("Conversation title cannot be empty")

        self.title = trimmed
        self.updated_at = datetime.now(timezone.utc)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def belongs_to_workspace(self, workspace_id: WorkspaceId) -> bool:
        return self.workspace_id == workspace_id
