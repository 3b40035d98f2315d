"""
PresetId Value Object - UUID wrapper for preset identity.
"""

from dataclasses import dataclass

from aistudio.domain.value_objects.id import Id


@dataclass(frozen=True)
class PresetId(Id):
    pass
