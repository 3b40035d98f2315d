"""
Base interfaces for commands and use cases.

Usage:
    class CreateConversationCommand(Command[Conversation]):
        workspace_id: IdStr
        title: NonBlankStr

    class CreateConversationUseCase(UseCase[Conversation]):
        def __init__(self, conversation_repository: ConversationRepository):
            self._conversation_repository = conversation_repository

        async def execute(self, command: CreateConversationCommand) -> Conversation:
            conversation = Conversation.create(...)
            return await self._conversation_repository.save(conversation)

Commands are validated when they are built, so a use case never sees a
malformed one. Unknown fields are ignored.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from aistudio.domain.exceptions import CommandValidationError

T = TypeVar("T")


class Command(BaseModel, Generic[T]):
    """Base class for use case inputs"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in errors
            )
            raise CommandValidationError(
                f"Invalid {type(self).__name__}: {details}", errors
            ) from e

    @classmethod
    def parse(cls, data: Mapping[str, Any]):
        """Build a command from a loosely-typed mapping (e.g. a request body)."""
        return cls(**dict(data))


class UseCase(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...
