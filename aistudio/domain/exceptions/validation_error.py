"""
Validation errors.

DomainValidationError - An entity invariant is violated (blank title, unknown
role, ...).
CommandValidationError - A command's shape is invalid. Raised while the
command is being built, before any use case logic or repository call.
Maps to: HTTP 422 Unprocessable Entity
"""

from typing import Any, Optional

from aistudio.domain.exceptions.base import DomainError


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)


class CommandValidationError(DomainValidationError):
    """Exception raised when a command fails its field constraints."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        """Dotted names of the offending fields."""
        return [".".join(str(p) for p in e.get("loc", ())) for e in self.errors]
