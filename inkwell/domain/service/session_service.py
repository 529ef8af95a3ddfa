"""Session domain service."""

import secrets
from datetime import timedelta

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.model import User, UserSession
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import SessionRepository

from .base import Service


class SessionService(Service):
    """Domain service for server-side login sessions."""

    def __init__(
        self, session_repository: SessionRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize session service.

        Args:
            session_repository: Session repository
            auth_settings: Authentication settings (session lifetime)
        """
        self.session_repository = session_repository
        self.auth_settings = auth_settings

    async def open_session(self, user: User) -> UserSession:
        """Start a session for an authenticated user.

        Args:
            user: Authenticated user

        Returns:
            Stored session whose token goes into the cookie
        """
        with logfire.span("session_service.open_session", user_id=str(user.id)):
            now = utcnow()
            session = UserSession(
                token=secrets.token_urlsafe(32),
                user_id=user.id,
                username=user.username,
                email=user.email,
                created_at=now,
                expires_at=now + timedelta(days=self.auth_settings.session_ttl_days),
            )
            saved = await self.session_repository.save(session)
            logfire.info("Session opened", user_id=str(user.id))
            return saved

    async def resolve(self, token: str | None) -> UserSession | None:
        """Look up the session behind a cookie token.

        Expired sessions are deleted and treated as absent.

        Args:
            token: Cookie token (optional)

        Returns:
            Active session, or None if missing, unknown or expired
        """
        if not token:
            return None

        session = await self.session_repository.find_by_token(token)
        if session is None:
            logfire.debug("Unknown session token")
            return None

        if session.is_expired():
            logfire.info("Session expired", user_id=str(session.user_id))
            await self.session_repository.delete(token)
            return None

        return session

    async def close_session(self, token: str | None) -> bool:
        """End a session.

        Args:
            token: Cookie token (optional)

        Returns:
            True if a session was deleted
        """
        if not token:
            return False

        with logfire.span("session_service.close_session"):
            deleted = await self.session_repository.delete(token)
            logfire.info("Session closed", deleted=deleted)
            return deleted
