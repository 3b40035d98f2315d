"""
MessageId Value Object - UUID wrapper for message identity.
"""

from dataclasses import dataclass

from aistudio.domain.value_objects.id import Id


@dataclass(frozen=True)
class MessageId(Id):
    pass
