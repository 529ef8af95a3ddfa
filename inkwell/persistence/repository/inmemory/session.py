"""In-memory session repository for testing."""

from typing import Optional

from inkwell.domain.model import UserSession
from inkwell.domain.repository import SessionRepository

from .store import InMemoryStore


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_token(self, token: str) -> Optional[UserSession]:
        """Find a session by token."""
        return self._store.sessions.get(token)

    async def save(self, session: UserSession) -> UserSession:
        """Store a session."""
        self._store.sessions[session.token] = session
        return session

    async def delete(self, token: str) -> bool:
        """Delete a session."""
        return self._store.sessions.pop(token, None) is not None
