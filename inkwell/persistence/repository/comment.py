"""PostgreSQL implementation of Comment repository."""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import Comment
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, PostId
from inkwell.persistence.mappers import comment_to_dict, row_to_comment
from inkwell.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_children(
        self, comment_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch direct reply IDs for several comments in a single query."""
        child_map: dict[UUID, list[UUID]] = defaultdict(list)
        if not comment_ids:
            return child_map

        stmt = (
            select(comments_table.c.parent_id, comments_table.c.id)
            .where(comments_table.c.parent_id.in_(comment_ids))
            .order_by(comments_table.c.created_at)
        )
        for row in (await self.session.execute(stmt)).fetchall():
            child_map[row.parent_id].append(row.id)
        return child_map

    async def _rows_to_comments(self, rows: Sequence) -> List[Comment]:
        child_map = await self._fetch_children([row.id for row in rows])
        return [
            row_to_comment(row._asdict(), child=child_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return (await self._rows_to_comments([row]))[0]

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return await self._rows_to_comments(result.fetchall())

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        existing = await self.find_by_id(comment.id)
        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(content=comment.content, updated_at=utcnow())
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()

        saved = await self.find_by_id(comment.id)
        if saved is None:
            raise NotFoundError("Comment", str(comment.id))
        return saved

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (replies cascade)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
