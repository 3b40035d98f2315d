"""Preset commands."""

from .create_preset import CreatePresetCommand, CreatePresetUseCase
from .update_preset import UpdatePresetCommand, UpdatePresetUseCase
from .delete_preset import DeletePresetCommand, DeletePresetUseCase

__all__ = [
    "CreatePresetCommand",
    "CreatePresetUseCase",
    "UpdatePresetCommand",
    "UpdatePresetUseCase",
    "DeletePresetCommand",
    "DeletePresetUseCase",
]
