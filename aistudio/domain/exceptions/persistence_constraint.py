"""
PersistenceConstraintError - Raised by repository adapters when storage
rejects a write for referential-integrity reasons (e.g. the referenced
workspace was deleted concurrently).
Maps to: HTTP 409 Conflict
"""

from aistudio.domain.exceptions.base import DomainError


class PersistenceConstraintError(DomainError):
    def __init__(self, message: str = "Storage constraint violated"):
        super().__init__(message)
