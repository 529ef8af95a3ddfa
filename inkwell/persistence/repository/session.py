"""PostgreSQL implementation of Session repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import UserSession
from inkwell.domain.repository import SessionRepository
from inkwell.persistence.mappers import row_to_session, session_to_dict
from inkwell.persistence.tables import user_sessions_table


class PostgresSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_token(self, token: str) -> Optional[UserSession]:
        """Find a login session by its token."""
        stmt = select(user_sessions_table).where(user_sessions_table.c.token == token)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_session(dict(row)) if row else None

    async def save(self, session: UserSession) -> UserSession:
        """Store a new login session."""
        stmt = user_sessions_table.insert().values(**session_to_dict(session))
        await self.session.execute(stmt)
        await self.session.flush()
        return session

    async def delete(self, token: str) -> bool:
        """Delete a login session."""
        stmt = user_sessions_table.delete().where(user_sessions_table.c.token == token)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
