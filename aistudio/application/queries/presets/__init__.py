"""Preset-related queries."""

from aistudio.application.queries.presets.get_preset import (
    GetPresetCommand,
    GetPresetUseCase,
)
from aistudio.application.queries.presets.list_presets import (
    ListPresetsCommand,
    ListPresetsUseCase,
)

__all__ = [
    "GetPresetCommand",
    "GetPresetUseCase",
    "ListPresetsCommand",
    "ListPresetsUseCase",
]
