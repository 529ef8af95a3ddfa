"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import User
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import UserId, Username
from inkwell.persistence.mappers import row_to_user, user_to_dict
from inkwell.persistence.tables import posts_table, users_table, votes_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_related(
        self, user_ids: list[UUID]
    ) -> tuple[dict[UUID, list[UUID]], dict[UUID, list[UUID]]]:
        """Fetch authored posts and voted posts for several users.

        Args:
            user_ids: List of user IDs

        Returns:
            Two dicts mapping user_id -> post IDs: authored, then voted on
        """
        posts_map: dict[UUID, list[UUID]] = defaultdict(list)
        score_map: dict[UUID, list[UUID]] = defaultdict(list)
        if not user_ids:
            return posts_map, score_map

        posts_stmt = (
            select(posts_table.c.author_id, posts_table.c.id)
            .where(posts_table.c.author_id.in_(user_ids))
            .order_by(posts_table.c.created_at)
        )
        for row in (await self.session.execute(posts_stmt)).fetchall():
            posts_map[row.author_id].append(row.id)

        votes_stmt = (
            select(votes_table.c.user_id, votes_table.c.post_id)
            .where(votes_table.c.user_id.in_(user_ids))
            .order_by(votes_table.c.created_at)
        )
        for row in (await self.session.execute(votes_stmt)).fetchall():
            score_map[row.user_id].append(row.post_id)

        return posts_map, score_map

    async def _rows_to_users(self, rows: Sequence) -> List[User]:
        user_ids = [row["id"] for row in rows]
        posts_map, score_map = await self._fetch_related(user_ids)
        return [
            row_to_user(
                dict(row),
                posts=posts_map.get(row["id"], []),
                score=score_map.get(row["id"], []),
            )
            for row in rows
        ]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return (await self._rows_to_users([row]))[0]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return (await self._rows_to_users([row]))[0]

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return await self._rows_to_users(result.mappings().all())

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            # Update; created_at is immutable
            user_dict.pop("created_at")
            user_dict["updated_at"] = utcnow()
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        saved = await self.find_by_id(user.id)
        if saved is None:
            raise NotFoundError("User", str(user.id))
        return saved
