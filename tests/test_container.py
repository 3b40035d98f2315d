"""
Container wiring: singleton lifecycle, backend selection, dishka provider.
"""

import asyncio

import pytest

from aistudio.application.commands.presets import CreatePresetUseCase
from aistudio.application.queries.presets import GetPresetUseCase
from aistudio.config.settings import TestingConfig
from aistudio.infrastructure.persistence.memory import (
    InMemoryAdapters,
    InMemoryConversationRepository,
)
from aistudio.setup.ioc.container import Container, create_container


class TestSingleton:
    def test_get_instance_is_identical(self):
        assert Container.get_instance() is Container.get_instance()

    def test_repositories_are_memoised(self):
        container = Container.get_instance()
        assert container.preset_repository is container.preset_repository
        assert container.conversation_repository is container.conversation_repository

    def test_reset_yields_new_repositories(self):
        before = Container.get_instance()
        repositories = (
            before.conversation_repository,
            before.message_repository,
            before.preset_repository,
            before.workspace_repository,
            before.user_repository,
        )

        Container.reset()
        after = Container.get_instance()

        assert after is not before
        fresh = (
            after.conversation_repository,
            after.message_repository,
            after.preset_repository,
            after.workspace_repository,
            after.user_repository,
        )
        for old, new in zip(repositories, fresh):
            assert old is not new


class TestShutdown:
    def test_shutdown_disconnects_then_resets(self):
        class RecordingAdapters(InMemoryAdapters):
            disconnected = False

            async def disconnect(self):
                self.disconnected = True

        adapters = RecordingAdapters()
        Container._instance = Container(adapters=adapters)

        asyncio.run(Container.shutdown())

        assert adapters.disconnected is True
        assert Container._instance is None

    def test_shutdown_without_instance(self):
        asyncio.run(Container.shutdown())
        assert Container._instance is None


class TestBackendSelection:
    def test_testing_env_uses_memory_backend(self):
        container = Container.get_instance()
        assert isinstance(container.adapters, InMemoryAdapters)
        assert isinstance(container.conversation_repository, InMemoryConversationRepository)

    def test_unknown_backend(self):
        class BrokenConfig(TestingConfig):
            PERSISTENCE_BACKEND = "cassandra"

        with pytest.raises(ValueError, match="Unknown persistence backend"):
            Container(config=BrokenConfig).adapters


class TestUseCaseFactories:
    def test_each_call_builds_a_new_use_case(self, container):
        first = container.create_get_preset_use_case()
        second = container.create_get_preset_use_case()
        assert isinstance(first, GetPresetUseCase)
        assert first is not second

    def test_use_cases_share_repositories(self, container):
        """A preset created through one use case is visible to another."""
        create = container.create_create_preset_use_case()
        get = container.create_get_preset_use_case()
        assert create._preset_repository is get._preset_repository

    @pytest.mark.parametrize(
        "factory",
        [
            "create_create_conversation_use_case",
            "create_add_message_use_case",
            "create_get_conversation_use_case",
            "create_list_conversations_use_case",
            "create_update_conversation_title_use_case",
            "create_delete_conversation_use_case",
            "create_create_preset_use_case",
            "create_get_preset_use_case",
            "create_list_presets_use_case",
            "create_update_preset_use_case",
            "create_delete_preset_use_case",
        ],
    )
    def test_every_factory_wires(self, container, factory):
        use_case = getattr(container, factory)()
        assert callable(use_case.execute)


class TestDishkaProvider:
    def test_request_scope_resolves_use_cases(self):
        async def resolve():
            dishka_container = await create_container()
            try:
                async with dishka_container() as request:
                    use_case = await request.get(CreatePresetUseCase)
                app_container = await dishka_container.get(Container)
            finally:
                await dishka_container.close()
            return use_case, app_container

        use_case, app_container = asyncio.run(resolve())

        assert isinstance(use_case, CreatePresetUseCase)
        assert app_container is Container.get_instance()
