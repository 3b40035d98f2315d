"""
DTOs - Data Transfer Objects

DTOs for transferring data out of the core:
- conversation.py → ConversationDTO, ConversationListDTO
- chat.py         → MessageDTO, ConversationDetailDTO
- preset.py       → PresetDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from aistudio.application.dto.conversation import ConversationDTO, ConversationListDTO
from aistudio.application.dto.chat import ConversationDetailDTO, MessageDTO
from aistudio.application.dto.preset import PresetDTO

__all__ = [
    "ConversationDTO",
    "ConversationListDTO",
    "ConversationDetailDTO",
    "MessageDTO",
    "PresetDTO",
]
