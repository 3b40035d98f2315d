"""
UserId Value Object
"""

from dataclasses import dataclass

from aistudio.domain.value_objects.id import Id


@dataclass(frozen=True)
class UserId(Id):
    pass
