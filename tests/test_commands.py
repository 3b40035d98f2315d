"""
Unit tests for command validation.

Commands reject bad input while being built, before any use case runs.
"""

import pytest

from aistudio.application.commands.conversations import (
    AddMessageCommand,
    CreateConversationCommand,
)
from aistudio.application.commands.presets import UpdatePresetCommand
from aistudio.application.queries.conversations import ListConversationsCommand
from aistudio.application.queries.presets import ListPresetsCommand
from aistudio.config.settings import Config
from aistudio.domain.exceptions import CommandValidationError, DomainValidationError
from aistudio.domain.value_objects import MessageRole

WORKSPACE = "11111111-1111-1111-1111-111111111111"
USER = "22222222-2222-2222-2222-222222222222"


def _create_conversation(**overrides):
    data = dict(
        workspace_id=WORKSPACE,
        user_id=USER,
        title="Chat 1",
        model="gpt-4",
        provider="openai",
    )
    data.update(overrides)
    return CreateConversationCommand(**data)


class TestCommandValidation:
    def test_valid_command(self):
        command = _create_conversation()
        assert command.title == "Chat 1"

    def test_ids_are_canonicalised(self):
        command = _create_conversation(workspace_id=WORKSPACE.upper())
        assert command.workspace_id == WORKSPACE

    def test_invalid_id_rejected(self):
        with pytest.raises(CommandValidationError) as exc_info:
            _create_conversation(workspace_id="nope")
        assert "workspace_id" in exc_info.value.fields

    def test_blank_title_rejected(self):
        with pytest.raises(CommandValidationError):
            _create_conversation(title="   ")

    def test_missing_field_rejected(self):
        with pytest.raises(CommandValidationError) as exc_info:
            CreateConversationCommand(workspace_id=WORKSPACE, user_id=USER, title="x")
        assert set(exc_info.value.fields) == {"model", "provider"}

    def test_validation_error_is_a_domain_validation_error(self):
        with pytest.raises(DomainValidationError):
            _create_conversation(provider="")

    def test_unknown_fields_ignored(self):
        command = _create_conversation(colour="blue")
        assert not hasattr(command, "colour")

    def test_commands_are_frozen(self):
        command = _create_conversation()
        with pytest.raises(Exception):
            command.title = "changed"

    def test_parse_from_mapping(self):
        command = CreateConversationCommand.parse(
            {
                "workspace_id": WORKSPACE,
                "user_id": USER,
                "title": "From request",
                "model": "gpt-4",
                "provider": "openai",
            }
        )
        assert command.title == "From request"


class TestAddMessageCommand:
    def test_role_and_defaults(self):
        command = AddMessageCommand(conversation_id=WORKSPACE, role="user", content="hi")
        assert command.role is MessageRole.USER
        assert command.tokens == 0
        assert command.credits == 0

    def test_unknown_role_rejected(self):
        with pytest.raises(CommandValidationError):
            AddMessageCommand(conversation_id=WORKSPACE, role="robot", content="hi")

    @pytest.mark.parametrize("value", [-1, True, "3", 1.5])
    def test_tokens_must_be_non_negative_int(self, value):
        with pytest.raises(CommandValidationError):
            AddMessageCommand(
                conversation_id=WORKSPACE, role="user", content="hi", tokens=value
            )


class TestListCommands:
    def test_conversation_page_defaults(self):
        command = ListConversationsCommand()
        assert command.limit == Config.CONVERSATION_PAGE_SIZE
        assert command.offset == 0

    def test_negative_offset_rejected(self):
        with pytest.raises(CommandValidationError):
            ListConversationsCommand(offset=-5)

    def test_preset_list_defaults(self):
        command = ListPresetsCommand()
        assert command.include_system_presets is False
        assert command.limit is None


class TestUpdatePresetCommand:
    def test_changes_only_include_supplied_fields(self):
        command = UpdatePresetCommand(id=WORKSPACE, name="Renamed", is_public=False)
        assert command.changes() == {"name": "Renamed", "is_public": False}

    def test_no_changes(self):
        command = UpdatePresetCommand(id=WORKSPACE)
        assert command.changes() == {}

    def test_blank_name_rejected(self):
        with pytest.raises(CommandValidationError):
            UpdatePresetCommand(id=WORKSPACE, name=" ")
