"""Reusable constrained field types for commands."""

from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field


def _check_uuid(value: str) -> str:
    try:
        return str(UUID(value))
    except ValueError:
        raise ValueError("must be a valid UUID")


def _check_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


IdStr = Annotated[str, AfterValidator(_check_uuid)]
NonBlankStr = Annotated[str, AfterValidator(_check_not_blank)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
