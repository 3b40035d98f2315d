"""Dependency wiring: the Container singleton and its dishka provider."""

from aistudio.setup.ioc.container import (
    AppProvider,
    Container,
    create_container,
)

__all__ = ["AppProvider", "Container", "create_container"]
