from aistudio.application.dto import (
    ConversationDetailDTO,
    ConversationDTO,
    ConversationListDTO,
    PresetDTO,
)
from aistudio.application.queries.conversations import ConversationWithMessages
from aistudio.domain.entities import Conversation, Message, Preset
from aistudio.domain.ports.repositories import ConversationPage
from aistudio.domain.value_objects import MessageRole


def test_conversation_detail_dto(workspace_id, user_id):
    conversation = Conversation.create(workspace_id, user_id, "Chat", "gpt-4", "openai")
    message = Message.create(conversation.id, MessageRole.ASSISTANT, "hello", tokens=12)

    dto = ConversationDetailDTO.from_result(
        ConversationWithMessages(conversation=conversation, messages=[message])
    )

    assert dto.conversation == ConversationDTO.from_entity(conversation)
    assert dto.conversation.workspace_id == str(workspace_id)
    assert dto.messages[0].role == "assistant"
    assert dto.messages[0].tokens == 12
    assert dto.model_dump()["messages"][0]["id"] == str(message.id)


def test_system_preset_dto():
    preset = Preset.create(
        name="Summary",
        description="Summarises text",
        category="writing",
        template="Summarise: {text}",
        model="gpt-4",
        parameters={"max_tokens": 200},
        is_public=True,
    )

    dto = PresetDTO.from_entity(preset)

    assert dto.workspace_id is None
    assert dto.is_system is True
    assert dto.parameters == {"max_tokens": 200}


def test_workspace_preset_dto(workspace_id):
    preset = Preset.create(
        name="Summary",
        description="Summarises text",
        category="writing",
        template="Summarise: {text}",
        model="gpt-4",
        workspace_id=workspace_id,
    )

    dto = PresetDTO.from_entity(preset)

    assert dto.workspace_id == str(workspace_id)
    assert dto.is_system is False


def test_conversation_list_dto_from_page(workspace_id, user_id):
    conversation = Conversation.create(workspace_id, user_id, "Chat", "gpt-4", "openai")
    page = ConversationPage(items=[conversation], total=3, has_more=True)

    dto = ConversationListDTO.from_page(page)

    assert [c.id for c in dto.conversations] == [str(conversation.id)]
    assert dto.total == 3
    assert dto.has_more is True
