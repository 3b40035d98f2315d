"""
Dependency wiring.

Container:
- Process-wide singleton (Container.get_instance / Container.reset / Container.shutdown)
- Picks the persistence adapters from Config.PERSISTENCE_BACKEND
- Builds each repository lazily, once, and shares it between use cases
- create_*_use_case returns a NEW use case per call, wired to those repositories

Dishka concepts (boundary wiring for the hosting app):
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Flow:
  AppProvider → Container (APP) → repositories → CreatePresetUseCase (REQUEST)
"""

from __future__ import annotations
import logging
from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from aistudio.application.commands.conversations import (
    AddMessageUseCase,
    CreateConversationUseCase,
    DeleteConversationUseCase,
    UpdateConversationTitleUseCase,
)
from aistudio.application.commands.presets import (
    CreatePresetUseCase,
    DeletePresetUseCase,
    UpdatePresetUseCase,
)
from aistudio.application.queries.conversations import (
    GetConversationUseCase,
    ListConversationsUseCase,
)
from aistudio.application.queries.presets import GetPresetUseCase, ListPresetsUseCase
from aistudio.config.settings import Config, get_config
from aistudio.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    PresetRepository,
    UserRepository,
    WorkspaceRepository,
)
from aistudio.infrastructure.persistence.memory import InMemoryAdapters

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
PRISMA_BACKEND = "prisma"


class Container:
    _instance: Optional[Container] = None

    def __init__(self, config: Optional[type[Config]] = None, adapters=None):
        """
        Args:
            config: Config class to read the backend from (default: get_config())
            adapters: Prebuilt adapter family; skips backend selection when given
        """
        self._config = config or get_config()
        self._adapters = adapters
        self._conversation_repository: Optional[ConversationRepository] = None
        self._message_repository: Optional[MessageRepository] = None
        self._preset_repository: Optional[PresetRepository] = None
        self._workspace_repository: Optional[WorkspaceRepository] = None
        self._user_repository: Optional[UserRepository] = None

    @classmethod
    def get_instance(cls) -> Container:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """
        Drop the singleton. The next get_instance() builds fresh repositories.

        Does not disconnect a Prisma client; use shutdown() for that.
        """
        cls._instance = None

    @classmethod
    async def shutdown(cls) -> None:
        """Disconnect the current instance's storage client, then reset."""
        if cls._instance is not None:
            await cls._instance.disconnect()
        cls.reset()

    # ==================== ADAPTERS ====================

    @property
    def adapters(self):
        if self._adapters is None:
            backend = self._config.PERSISTENCE_BACKEND
            if backend == MEMORY_BACKEND:
                self._adapters = InMemoryAdapters()
            elif backend == PRISMA_BACKEND:
                # Needs a generated prisma client, so only imported on demand
                from aistudio.infrastructure.persistence.prisma_client import (
                    PrismaAdapters,
                )

                self._adapters = PrismaAdapters()
            else:
                raise ValueError(f"Unknown persistence backend: {backend}")
            logger.info(f"Using '{backend}' persistence backend")
        return self._adapters

    async def connect(self) -> None:
        await self.adapters.connect()

    async def disconnect(self) -> None:
        if self._adapters is not None:
            await self._adapters.disconnect()

    # ==================== REPOSITORIES ====================

    @property
    def conversation_repository(self) -> ConversationRepository:
        if self._conversation_repository is None:
            self._conversation_repository = self.adapters.conversation_repository()
        return self._conversation_repository

    @property
    def message_repository(self) -> MessageRepository:
        if self._message_repository is None:
            self._message_repository = self.adapters.message_repository()
        return self._message_repository

    @property
    def preset_repository(self) -> PresetRepository:
        if self._preset_repository is None:
            self._preset_repository = self.adapters.preset_repository()
        return self._preset_repository

    @property
    def workspace_repository(self) -> WorkspaceRepository:
        if self._workspace_repository is None:
            self._workspace_repository = self.adapters.workspace_repository()
        return self._workspace_repository

    @property
    def user_repository(self) -> UserRepository:
        if self._user_repository is None:
            self._user_repository = self.adapters.user_repository()
        return self._user_repository

    # ==================== CONVERSATION USE CASES ====================

    def create_create_conversation_use_case(self) -> CreateConversationUseCase:
        return CreateConversationUseCase(
            conversation_repository=self.conversation_repository,
            workspace_repository=self.workspace_repository,
            user_repository=self.user_repository,
        )

    def create_add_message_use_case(self) -> AddMessageUseCase:
        return AddMessageUseCase(
            message_repository=self.message_repository,
            conversation_repository=self.conversation_repository,
        )

    def create_get_conversation_use_case(self) -> GetConversationUseCase:
        return GetConversationUseCase(
            conversation_repository=self.conversation_repository,
            message_repository=self.message_repository,
        )

    def create_list_conversations_use_case(self) -> ListConversationsUseCase:
        return ListConversationsUseCase(self.conversation_repository)

    def create_update_conversation_title_use_case(
        self,
    ) -> UpdateConversationTitleUseCase:
        return UpdateConversationTitleUseCase(self.conversation_repository)

    def create_delete_conversation_use_case(self) -> DeleteConversationUseCase:
        return DeleteConversationUseCase(
            conversation_repository=self.conversation_repository,
            message_repository=self.message_repository,
        )

    # ==================== PRESET USE CASES ====================

    def create_create_preset_use_case(self) -> CreatePresetUseCase:
        return CreatePresetUseCase(
            preset_repository=self.preset_repository,
            workspace_repository=self.workspace_repository,
        )

    def create_get_preset_use_case(self) -> GetPresetUseCase:
        return GetPresetUseCase(self.preset_repository)

    def create_list_presets_use_case(self) -> ListPresetsUseCase:
        return ListPresetsUseCase(self.preset_repository)

    def create_update_preset_use_case(self) -> UpdatePresetUseCase:
        return UpdatePresetUseCase(self.preset_repository)

    def create_delete_preset_use_case(self) -> DeletePresetUseCase:
        return DeletePresetUseCase(self.preset_repository)


class AppProvider(Provider):
    """
    Application dependency provider.

    - Container is APP-scoped: created ONCE when the app starts, connected,
      and disconnected when the dishka container closes
    - Use cases are REQUEST-scoped: a fresh instance per request
    """

    @provide(scope=Scope.APP)
    async def get_container(self) -> AsyncIterable[Container]:
        container = Container.get_instance()
        await container.connect()
        yield container
        await container.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_create_conversation_use_case(
        self, container: Container
    ) -> CreateConversationUseCase:
        return container.create_create_conversation_use_case()

    @provide(scope=Scope.REQUEST)
    def get_add_message_use_case(self, container: Container) -> AddMessageUseCase:
        return container.create_add_message_use_case()

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_use_case(
        self, container: Container
    ) -> GetConversationUseCase:
        return container.create_get_conversation_use_case()

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_use_case(
        self, container: Container
    ) -> ListConversationsUseCase:
        return container.create_list_conversations_use_case()

    @provide(scope=Scope.REQUEST)
    def get_update_conversation_title_use_case(
        self, container: Container
    ) -> UpdateConversationTitleUseCase:
        return container.create_update_conversation_title_use_case()

    @provide(scope=Scope.REQUEST)
    def get_delete_conversation_use_case(
        self, container: Container
    ) -> DeleteConversationUseCase:
        return container.create_delete_conversation_use_case()

    @provide(scope=Scope.REQUEST)
    def get_create_preset_use_case(self, container: Container) -> CreatePresetUseCase:
        return container.create_create_preset_use_case()

    @provide(scope=Scope.REQUEST)
    def get_get_preset_use_case(self, container: Container) -> GetPresetUseCase:
        return container.create_get_preset_use_case()

    @provide(scope=Scope.REQUEST)
    def get_list_presets_use_case(self, container: Container) -> ListPresetsUseCase:
        return container.create_list_presets_use_case()

    @provide(scope=Scope.REQUEST)
    def get_update_preset_use_case(self, container: Container) -> UpdatePresetUseCase:
        return container.create_update_preset_use_case()

    @provide(scope=Scope.REQUEST)
    def get_delete_preset_use_case(self, container: Container) -> DeletePresetUseCase:
        return container.create_delete_preset_use_case()


async def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE at app startup, close it at shutdown
    """
    return make_async_container(AppProvider())
