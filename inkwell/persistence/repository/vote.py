"""PostgreSQL implementation of Vote repository."""

from typing import List

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import VoteRepository
from inkwell.domain.value import PostId, UserId
from inkwell.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, user_id: UserId, post_id: PostId):
        return and_(votes_table.c.user_id == user_id, votes_table.c.post_id == post_id)

    async def exists(self, user_id: UserId, post_id: PostId) -> bool:
        """Check whether the user has voted on the post."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(self._pair(user_id, post_id))
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def add(self, user_id: UserId, post_id: PostId) -> bool:
        """Record a vote; a concurrent duplicate is ignored by the primary key."""
        stmt = (
            insert(votes_table)
            .values(user_id=user_id, post_id=post_id, created_at=utcnow())
            .on_conflict_do_nothing(index_elements=["user_id", "post_id"])
            .returning(votes_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    async def remove(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a vote."""
        stmt = votes_table.delete().where(self._pair(user_id, post_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_voters(self, post_id: PostId) -> List[UserId]:
        """Users who voted on a post, oldest vote first."""
        stmt = (
            select(votes_table.c.user_id)
            .where(votes_table.c.post_id == post_id)
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [UserId(user_id) for user_id in result.scalars().all()]

    async def find_voted_posts(self, user_id: UserId) -> List[PostId]:
        """Posts a user voted on, oldest vote first."""
        stmt = (
            select(votes_table.c.post_id)
            .where(votes_table.c.user_id == user_id)
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [PostId(post_id) for post_id in result.scalars().all()]
