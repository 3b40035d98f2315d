"""
Id Value Object - UUID wrapper shared by every entity identity.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Id:
    value: str  # presented as canonical UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError(f"{type(self).__name__} cannot be empty")
        try:
            canonical = str(UUID(self.value))
        except (ValueError, AttributeError, TypeError):
            raise ValueError(f"Invalid {type(self).__name__} (UUID): {self.value}")
        # Normalise casing/braces so equal UUIDs compare equal
        object.__setattr__(self, "value", canonical)

    @classmethod
    def generate(cls):
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
