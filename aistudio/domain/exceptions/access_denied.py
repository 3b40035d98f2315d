"""
AccessDeniedError - Raised when the caller does not own the resource, or the
caller's workspace does not match the resource's workspace.
Maps to: HTTP 403 Forbidden
"""

from aistudio.domain.exceptions.base import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to access a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
