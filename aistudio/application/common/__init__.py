"""Shared application building blocks."""

from aistudio.application.common.interfaces import Command, UseCase
from aistudio.application.common.fields import IdStr, NonBlankStr, NonNegativeInt

__all__ = [
    "Command",
    "UseCase",
    "IdStr",
    "NonBlankStr",
    "NonNegativeInt",
]
