"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""

from aistudio.domain.exceptions.base import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
