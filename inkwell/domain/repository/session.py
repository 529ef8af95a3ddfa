"""Session repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.session import UserSession


class SessionRepository(ABC):
    """Server-side store for login sessions."""

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[UserSession]:
        """Find a session by its cookie token.

        Args:
            token: Session token

        Returns:
            The session if found (expired or not), None otherwise
        """
        pass

    @abstractmethod
    async def save(self, session: UserSession) -> UserSession:
        """Store a new session."""
        pass

    @abstractmethod
    async def delete(self, token: str) -> bool:
        """Delete a session.

        Returns:
            True if a session was deleted, False if none existed
        """
        pass
