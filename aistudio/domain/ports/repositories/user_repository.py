"""
User Repository Port - Read-only view of the external user aggregate.
"""

from abc import ABC, abstractmethod

from aistudio.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def exists(self, user_id: UserId) -> bool: ...
