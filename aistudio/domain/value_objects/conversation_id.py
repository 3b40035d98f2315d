"""
ConversationId Value Object - UUID wrapper for conversation identity.
"""

from dataclasses import dataclass

from aistudio.domain.value_objects.id import Id


@dataclass(frozen=True)
class ConversationId(Id):
    pass
