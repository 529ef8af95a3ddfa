"""Post domain service."""

import math
import re
from uuid import uuid4

import logfire

from inkwell.config import ContentSettings
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model.common import utcnow
from inkwell.domain.model.post import Post
from inkwell.domain.repository import AuthorViews, PostRepository, TagCount
from inkwell.domain.value import PostId, Slug, TagName, UserId

from .base import Service

# Path segments taken by sibling routes under /api/post/
RESERVED_SLUGS = frozenset({"vote", "unvote", "comment"})


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, content_settings: ContentSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            content_settings: Page size and aggregation limits
        """
        self.post_repository = post_repository
        self.content_settings = content_settings

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        tags: list[TagName],
    ) -> Post:
        """Create a post with a unique slug.

        Args:
            author_id: Owning user
            title: Post title
            content: Post body
            tags: Tags (duplicates are dropped)

        Returns:
            Saved post
        """
        post_id = PostId(uuid4())
        with logfire.span(
            "post_service.create_post", post_id=str(post_id), title=title
        ):
            slug = await self.generate_unique_slug(title, post_id)
            now = utcnow()
            post = Post(
                id=post_id,
                slug=slug,
                title=title,
                content=content,
                tags=self.normalize_tags(tags),
                author_id=author_id,
                views=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def get_post_by_slug(self, slug: Slug) -> Post | None:
        """Get a post by slug.

        Args:
            slug: Post slug

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_slug", slug=str(slug)):
            post = await self.post_repository.find_by_slug(slug)
            if not post:
                logfire.warn("Post not found by slug", slug=str(slug))
            return post

    async def list_recent(
        self, page: int = 1, tag: TagName | None = None
    ) -> tuple[list[Post], int]:
        """Get one page of posts, newest first.

        Args:
            page: 1-based page number
            tag: Only posts carrying this tag

        Returns:
            Posts on the page and the total number of matching posts

        Raises:
            ValidationError: If page is below 1
        """
        if page < 1:
            raise ValidationError("Page must be 1 or greater")

        limit = self.content_settings.page_size
        with logfire.span(
            "post_service.list_recent",
            page=page,
            limit=limit,
            tag=tag.root if tag else None,
        ):
            total = await self.post_repository.count(tag=tag)
            posts = await self.post_repository.find_recent(
                tag=tag, limit=limit, offset=(page - 1) * limit
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    def page_count(self, total: int) -> int:
        """Number of pages needed for ``total`` posts (at least 1)."""
        return max(1, math.ceil(total / self.content_settings.page_size))

    async def update_post(
        self,
        slug: Slug,
        title: str | None = None,
        content: str | None = None,
        tags: list[TagName] | None = None,
    ) -> Post:
        """Update the given fields of a post.

        The slug stays stable when the title changes.

        Args:
            slug: Slug of the post to update
            title: New title (None to keep)
            content: New content (None to keep)
            tags: New tags (None to keep)

        Returns:
            Updated post

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("post_service.update_post", slug=str(slug)):
            post = await self.post_repository.find_by_slug(slug)
            if not post:
                raise NotFoundError("Post", str(slug))

            changes: dict = {"updated_at": utcnow()}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content
            if tags is not None:
                changes["tags"] = self.normalize_tags(tags)

            # model_copy skips validation, so rebuild to enforce field limits
            updated = Post.model_validate({**post.model_dump(), **changes})
            saved = await self.post_repository.save(updated)
            logfire.info(
                "Post updated", post_id=str(saved.id), fields=sorted(changes.keys())
            )
            return saved

    async def delete_post(self, slug: Slug) -> Post:
        """Delete a post with its comments and votes.

        Args:
            slug: Slug of the post to delete

        Returns:
            The deleted post

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("post_service.delete_post", slug=str(slug)):
            post = await self.post_repository.find_by_slug(slug)
            if not post:
                raise NotFoundError("Post", str(slug))

            await self.post_repository.delete(post.id)
            logfire.info(
                "Post deleted", post_id=str(post.id), author_id=str(post.author_id)
            )
            return post

    async def record_view(self, post: Post) -> Post:
        """Count one view of a post.

        Args:
            post: Post being viewed

        Returns:
            The post with its view counter incremented by one
        """
        with logfire.span("post_service.record_view", post_id=str(post.id)):
            await self.post_repository.increment_views(post.id)
            return post.model_copy(update={"views": post.views + 1})

    async def get_most_viewed(self) -> list[Post]:
        """Get the most viewed posts, limited by hot_posts_limit."""
        with logfire.span("post_service.get_most_viewed"):
            return await self.post_repository.find_most_viewed(
                self.content_settings.hot_posts_limit
            )

    async def get_top_authors(self) -> list[AuthorViews]:
        """Get authors ranked by total views, limited by hot_authors_limit."""
        with logfire.span("post_service.get_top_authors"):
            return await self.post_repository.sum_views_by_author(
                self.content_settings.hot_authors_limit
            )

    async def get_hot_tags(self) -> list[TagCount]:
        """Get tags by name descending, limited by hot_tags_limit."""
        with logfire.span("post_service.get_hot_tags"):
            return await self.post_repository.count_tags(
                limit=self.content_settings.hot_tags_limit
            )

    async def get_all_tags(self) -> list[TagCount]:
        """Get every tag in use with its post count, by name descending."""
        with logfire.span("post_service.get_all_tags"):
            return await self.post_repository.count_tags()

    async def generate_unique_slug(self, title: str, post_id: PostId) -> Slug:
        """Generate a unique slug from a title.

        Handles collisions by appending numeric suffixes.

        Args:
            title: Post title to slugify
            post_id: Post ID (used for fallback if title produces empty slug)

        Returns:
            Unique slug for the post
        """
        base_slug_str = self._slugify(title)

        if not base_slug_str:
            fallback = f"post-{post_id.hex[:8]}"
            logfire.info(
                "Using fallback slug for empty title",
                post_id=str(post_id),
                slug=fallback,
            )
            return Slug(fallback)

        slug_str = base_slug_str
        counter = 1
        while slug_str in RESERVED_SLUGS or await self.post_repository.slug_exists(
            Slug(slug_str)
        ):
            suffix = f"-{counter}"
            # Keep within 100 chars; strip so a cut never leaves "--"
            slug_str = base_slug_str[: 100 - len(suffix)].rstrip("-") + suffix
            counter += 1

        logfire.debug(
            "Generated unique slug", slug=slug_str, had_collision=counter > 1
        )
        return Slug(slug_str)

    @staticmethod
    def normalize_tags(tags: list[TagName]) -> list[TagName]:
        """Drop duplicate tags, keeping first occurrence order."""
        seen: set[str] = set()
        result = []
        for tag in tags:
            if tag.root not in seen:
                seen.add(tag.root)
                result.append(tag)
        return result

    @staticmethod
    def _slugify(title: str) -> str:
        """Convert title to URL-safe slug format.

        - Converts to lowercase
        - Replaces runs of non-alphanumeric chars with one hyphen
        - Truncates to 100 characters and strips edge hyphens

        Args:
            title: Title to slugify

        Returns:
            URL-safe slug string (may be empty if title has no valid chars)
        """
        slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
        return slug.strip("-")[:100].strip("-")
