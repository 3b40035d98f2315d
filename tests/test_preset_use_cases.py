"""
Preset use cases against the in-memory adapters.

Run with: pytest tests/test_preset_use_cases.py -v
"""

import asyncio

import pytest

from aistudio.application.commands.presets import (
    CreatePresetCommand,
    DeletePresetCommand,
    UpdatePresetCommand,
)
from aistudio.application.queries.presets import GetPresetCommand, ListPresetsCommand
from aistudio.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    ProtectedResourceError,
)
from aistudio.domain.value_objects import WorkspaceId

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def _create(container, workspace_id=None, name="Blog post", **overrides):
    data = dict(
        workspace_id=str(workspace_id) if workspace_id else None,
        name=name,
        description="Writes a blog post",
        category="writing",
        template="Write about {topic}",
        model="gpt-4",
    )
    data.update(overrides)
    command = CreatePresetCommand(**data)
    return asyncio.run(container.create_create_preset_use_case().execute(command))


def _get(container, preset, workspace_id=None):
    command = GetPresetCommand(
        id=str(preset.id),
        workspace_id=str(workspace_id) if workspace_id else None,
    )
    return asyncio.run(container.create_get_preset_use_case().execute(command))


def _list(container, **kwargs):
    command = ListPresetsCommand(**kwargs)
    return asyncio.run(container.create_list_presets_use_case().execute(command))


class TestCreatePreset:
    def test_workspace_preset(self, container, workspace_id):
        preset = _create(container, workspace_id, parameters={"temperature": 0.2})

        assert preset.workspace_id == workspace_id
        assert preset.parameters == {"temperature": 0.2}
        assert preset.usage_count == 0

    def test_without_workspace_creates_system_preset(self, container):
        preset = _create(container, is_public=True)
        assert preset.is_system_preset()

    def test_unknown_workspace(self, container):
        with pytest.raises(EntityNotFoundError, match="Workspace not found"):
            _create(container, WorkspaceId.generate())


class TestGetPreset:
    def test_each_get_counts_one_use(self, container, workspace_id):
        preset = _create(container, workspace_id)

        first = _get(container, preset, workspace_id)
        second = _get(container, preset, workspace_id)

        assert first.usage_count == 1
        assert second.usage_count == 2
        stored = asyncio.run(container.preset_repository.find_by_id(preset.id))
        assert stored.usage_count == 2

    def test_public_system_preset_visible_to_any_workspace(self, container, workspace_id):
        preset = _create(container, is_public=True)
        assert _get(container, preset, workspace_id).id == preset.id

    def test_other_workspace_refused(self, container, workspace_id, other_workspace_id):
        preset = _create(container, workspace_id)

        with pytest.raises(AccessDeniedError, match="Access denied"):
            _get(container, preset, other_workspace_id)

        stored = asyncio.run(container.preset_repository.find_by_id(preset.id))
        assert stored.usage_count == 0

    def test_private_system_preset_refused(self, container, workspace_id):
        preset = _create(container, is_public=False)
        with pytest.raises(AccessDeniedError):
            _get(container, preset, workspace_id)

    def test_without_caller_workspace_no_access_check(self, container, workspace_id):
        preset = _create(container, workspace_id)
        assert _get(container, preset).usage_count == 1

    def test_unknown_preset(self, container):
        command = GetPresetCommand(id=MISSING_ID)
        with pytest.raises(EntityNotFoundError, match="Preset not found"):
            asyncio.run(container.create_get_preset_use_case().execute(command))

    def test_concurrent_gets_lose_no_updates(self, container, workspace_id):
        preset = _create(container, workspace_id)
        calls = 25

        async def use_concurrently():
            use_case = container.create_get_preset_use_case()
            command = GetPresetCommand(id=str(preset.id))
            await asyncio.gather(*(use_case.execute(command) for _ in range(calls)))
            return await container.preset_repository.find_by_id(preset.id)

        stored = asyncio.run(use_concurrently())
        assert stored.usage_count == calls


class TestListPresets:
    def test_workspace_plus_public_system_presets(
        self, container, workspace_id, other_workspace_id
    ):
        """Own presets and public system presets, nothing from other workspaces."""
        own = _create(container, workspace_id, name="P2")
        public_system = _create(container, name="P3", is_public=True)
        _create(container, other_workspace_id, name="P4")
        _create(container, name="private system", is_public=False)

        listed = _list(
            container, workspace_id=str(workspace_id), include_system_presets=True
        )

        ids = [p.id for p in listed]
        assert set(ids) == {own.id, public_system.id}
        assert len(ids) == len(set(ids))

    def test_workspace_only(self, container, workspace_id):
        own = _create(container, workspace_id)
        _create(container, is_public=True)

        listed = _list(container, workspace_id=str(workspace_id))
        assert [p.id for p in listed] == [own.id]

    def test_most_used_first(self, container, workspace_id):
        rarely = _create(container, workspace_id, name="rarely")
        often = _create(container, workspace_id, name="often")
        _get(container, often)
        _get(container, often)
        _get(container, rarely)

        listed = _list(container, workspace_id=str(workspace_id))
        assert [p.name for p in listed] == ["often", "rarely"]

    def test_category_and_visibility_filters(self, container, workspace_id):
        _create(container, workspace_id, name="a", category="writing")
        wanted = _create(container, workspace_id, name="b", category="code", is_public=True)
        _create(container, workspace_id, name="c", category="code", is_public=False)

        listed = _list(
            container, workspace_id=str(workspace_id), category="code", is_public=True
        )
        assert [p.id for p in listed] == [wanted.id]

    def test_limit_and_offset(self, container, workspace_id):
        for name in ("first", "second", "third"):
            _create(container, workspace_id, name=name)

        listed = _list(container, workspace_id=str(workspace_id), limit=1, offset=1)
        assert [p.name for p in listed] == ["second"]


class TestUpdatePreset:
    def test_partial_update(self, container, workspace_id):
        preset = _create(container, workspace_id)

        updated = asyncio.run(
            container.create_update_preset_use_case().execute(
                UpdatePresetCommand(id=str(preset.id), template="New {topic}")
            )
        )

        assert updated.template == "New {topic}"
        assert updated.name == "Blog post"
        stored = asyncio.run(container.preset_repository.find_by_id(preset.id))
        assert stored.template == "New {topic}"

    def test_update_keeps_usage_count(self, container, workspace_id):
        preset = _create(container, workspace_id)
        _get(container, preset)

        updated = asyncio.run(
            container.create_update_preset_use_case().execute(
                UpdatePresetCommand(id=str(preset.id), name="Renamed")
            )
        )
        assert updated.usage_count == 1

    def test_system_preset_cannot_be_modified(self, container):
        preset = _create(container, is_public=True)

        command = UpdatePresetCommand(id=str(preset.id), name="X")
        with pytest.raises(ProtectedResourceError, match="System presets cannot be modified"):
            asyncio.run(container.create_update_preset_use_case().execute(command))

    def test_system_preset_protected_even_without_changes(self, container):
        preset = _create(container)
        command = UpdatePresetCommand(id=str(preset.id))
        with pytest.raises(ProtectedResourceError):
            asyncio.run(container.create_update_preset_use_case().execute(command))

    def test_other_workspace_refused(self, container, workspace_id, other_workspace_id):
        preset = _create(container, workspace_id)
        command = UpdatePresetCommand(
            id=str(preset.id), workspace_id=str(other_workspace_id), name="X"
        )
        with pytest.raises(AccessDeniedError):
            asyncio.run(container.create_update_preset_use_case().execute(command))

    def test_unknown_preset(self, container):
        command = UpdatePresetCommand(id=MISSING_ID, name="X")
        with pytest.raises(EntityNotFoundError, match="Preset not found"):
            asyncio.run(container.create_update_preset_use_case().execute(command))


class TestDeletePreset:
    def test_deletes_own_preset(self, container, workspace_id):
        preset = _create(container, workspace_id)

        asyncio.run(
            container.create_delete_preset_use_case().execute(
                DeletePresetCommand(id=str(preset.id), workspace_id=str(workspace_id))
            )
        )

        assert asyncio.run(container.preset_repository.find_by_id(preset.id)) is None

    def test_system_preset_cannot_be_deleted(self, container, workspace_id):
        preset = _create(container, is_public=True)

        command = DeletePresetCommand(id=str(preset.id), workspace_id=str(workspace_id))
        with pytest.raises(ProtectedResourceError, match="System presets cannot be deleted"):
            asyncio.run(container.create_delete_preset_use_case().execute(command))
        assert asyncio.run(container.preset_repository.find_by_id(preset.id)) is not None

    def test_other_workspace_refused(self, container, workspace_id, other_workspace_id):
        preset = _create(container, workspace_id)

        command = DeletePresetCommand(
            id=str(preset.id), workspace_id=str(other_workspace_id)
        )
        with pytest.raises(AccessDeniedError, match="Access denied"):
            asyncio.run(container.create_delete_preset_use_case().execute(command))

    def test_unknown_preset(self, container):
        command = DeletePresetCommand(id=MISSING_ID)
        with pytest.raises(EntityNotFoundError, match="Preset not found"):
            asyncio.run(container.create_delete_preset_use_case().execute(command))
