"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Is built through create() (validated) or from_persistence() (trusted)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from aistudio.domain.entities.conversation import Conversation
from aistudio.domain.entities.message import Message
from aistudio.domain.entities.preset import Preset

__all__ = [
    "Conversation",
    "Message",
    "Preset",
]
