from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class ISessionTokenCodec(ABC):
    """Session token interface - issues and verifies stateless bearer tokens"""

    @abstractmethod
    def issue(self, user_id: UUID) -> str:
        """Issue a signed token for the user"""
        pass

    @abstractmethod
    def verify(self, token: str) -> Optional[str]:
        """Return the user id claim of a valid token, None for anything else"""
        pass
