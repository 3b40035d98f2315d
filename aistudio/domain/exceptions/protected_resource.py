"""
ProtectedResourceError - Raised when a system-owned resource would be
modified or deleted.
Maps to: HTTP 403 Forbidden
"""

from aistudio.domain.exceptions.base import DomainError


class ProtectedResourceError(DomainError):
    def __init__(self, message: str = "Resource is protected"):
        super().__init__(message)
