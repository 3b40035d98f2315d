"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and use cases and propagate
unchanged to the caller. The presentation layer maps them to status codes.
"""

from aistudio.domain.exceptions.base import DomainError
from aistudio.domain.exceptions.entity_not_found import EntityNotFoundError
from aistudio.domain.exceptions.access_denied import AccessDeniedError
from aistudio.domain.exceptions.validation_error import (
    CommandValidationError,
    DomainValidationError,
)
from aistudio.domain.exceptions.protected_resource import ProtectedResourceError
from aistudio.domain.exceptions.persistence_constraint import (
    PersistenceConstraintError,
)

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "CommandValidationError",
    "ProtectedResourceError",
    "PersistenceConstraintError",
]
