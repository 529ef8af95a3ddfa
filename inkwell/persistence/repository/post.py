"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import Post
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository.post import (
    AuthorViews,
    PostRepository,
    TagCount,
)
from inkwell.domain.value import PostId, Slug, TagName, UserId
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import (
    comments_table,
    post_tags_table,
    posts_table,
    votes_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_related(
        self, post_ids: list[UUID]
    ) -> tuple[
        dict[UUID, list[str]], dict[UUID, list[UUID]], dict[UUID, list[UUID]]
    ]:
        """Fetch tags, voters and comment IDs for multiple posts.

        One query per relation regardless of the number of posts.

        Args:
            post_ids: List of post IDs

        Returns:
            Dicts mapping post_id -> tags, voter IDs and comment IDs
        """
        tag_map: dict[UUID, list[str]] = defaultdict(list)
        vote_map: dict[UUID, list[UUID]] = defaultdict(list)
        comment_map: dict[UUID, list[UUID]] = defaultdict(list)
        if not post_ids:
            return tag_map, vote_map, comment_map

        tags_stmt = (
            select(post_tags_table.c.post_id, post_tags_table.c.tag)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.position)
        )
        for row in (await self.session.execute(tags_stmt)).fetchall():
            tag_map[row.post_id].append(row.tag)

        votes_stmt = (
            select(votes_table.c.post_id, votes_table.c.user_id)
            .where(votes_table.c.post_id.in_(post_ids))
            .order_by(votes_table.c.created_at)
        )
        for row in (await self.session.execute(votes_stmt)).fetchall():
            vote_map[row.post_id].append(row.user_id)

        comments_stmt = (
            select(comments_table.c.post_id, comments_table.c.id)
            .where(comments_table.c.post_id.in_(post_ids))
            .order_by(comments_table.c.created_at)
        )
        for row in (await self.session.execute(comments_stmt)).fetchall():
            comment_map[row.post_id].append(row.id)

        return tag_map, vote_map, comment_map

    async def _rows_to_posts(self, rows: Sequence) -> List[Post]:
        """Build Post domain models with their derived lists."""
        post_ids = [row.id for row in rows]
        tag_map, vote_map, comment_map = await self._fetch_related(post_ids)
        return [
            row_to_post(
                row._asdict(),
                tags=tag_map.get(row.id, []),
                votes=vote_map.get(row.id, []),
                comments=comment_map.get(row.id, []),
            )
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return (await self._rows_to_posts([row]))[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            stmt = select(posts_table).where(posts_table.c.slug == str(slug))
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return (await self._rows_to_posts([row]))[0]

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is taken."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.slug == str(slug))
        )
        result = await self.session.execute(stmt)
        exists = (result.scalar() or 0) > 0

        logfire.debug("Slug existence check", slug=str(slug), exists=exists)
        return exists

    def _filter_by_tag(self, stmt, tag: Optional[TagName]):
        """Restrict a posts query to posts carrying ``tag``."""
        if tag is None:
            return stmt
        return stmt.where(
            posts_table.c.id.in_(
                select(post_tags_table.c.post_id).where(
                    post_tags_table.c.tag == tag.root
                )
            )
        )

    async def find_recent(
        self,
        tag: Optional[TagName] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first, with pagination."""
        with logfire.span(
            "post_repository.find_recent",
            tag=tag.root if tag else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter_by_tag(select(posts_table), tag)
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            rows = result.fetchall()

            if not rows:
                logfire.info("No posts found")
                return []

            posts = await self._rows_to_posts(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count posts, optionally only those carrying a tag."""
        with logfire.span("post_repository.count", tag=tag.root if tag else None):
            stmt = self._filter_by_tag(
                select(func.count()).select_from(posts_table), tag
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def find_most_viewed(self, limit: int) -> List[Post]:
        """Find posts ordered by views descending."""
        with logfire.span("post_repository.find_most_viewed", limit=limit):
            stmt = (
                select(posts_table)
                .order_by(desc(posts_table.c.views), desc(posts_table.c.created_at))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return await self._rows_to_posts(result.fetchall())

    async def sum_views_by_author(self, limit: int) -> List[AuthorViews]:
        """Group posts by author and sum their views."""
        with logfire.span("post_repository.sum_views_by_author", limit=limit):
            total_views = func.sum(posts_table.c.views).label("views")
            stmt = (
                select(posts_table.c.author_id, total_views)
                .group_by(posts_table.c.author_id)
                .order_by(desc(total_views), posts_table.c.author_id)
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [
                AuthorViews(author_id=UserId(row.author_id), views=int(row.views))
                for row in result.fetchall()
            ]

    async def count_tags(self, limit: Optional[int] = None) -> List[TagCount]:
        """Count how many posts carry each tag, by name descending."""
        with logfire.span("post_repository.count_tags", limit=limit):
            occurrences = func.count().label("count")
            stmt = (
                select(post_tags_table.c.tag, occurrences)
                .group_by(post_tags_table.c.tag)
                .order_by(desc(post_tags_table.c.tag))
            )

            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            return [
                TagCount(name=row.tag, count=int(row.count))
                for row in result.fetchall()
            ]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            title=post.title,
            tags=[t.root for t in post.tags],
        ):
            existing = await self.find_by_id(post.id)

            post_dict = post_to_dict(post)

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                # Counters and creation time are not written on update
                for column in ("created_at", "views", "author_id"):
                    post_dict.pop(column)
                post_dict["updated_at"] = utcnow()
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                await self.session.execute(stmt)

                await self.session.execute(
                    post_tags_table.delete().where(
                        post_tags_table.c.post_id == post.id
                    )
                )
            else:
                logfire.info(
                    "Inserting new post",
                    post_id=str(post.id),
                    author_id=str(post.author_id),
                )
                await self.session.execute(posts_table.insert().values(**post_dict))

            if post.tags:
                await self.session.execute(
                    insert(post_tags_table),
                    [
                        {"post_id": post.id, "tag": tag.root, "position": position}
                        for position, tag in enumerate(post.tags)
                    ],
                )

            await self.session.flush()
            saved = await self.find_by_id(post.id)
            if saved is None:
                raise NotFoundError("Post", str(post.id))
            return saved

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (comments, votes and tags cascade)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(views=posts_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
