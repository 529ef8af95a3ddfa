"""Post repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from inkwell.domain.model.post import Post
from inkwell.domain.value import PostId, Slug, TagName, UserId


@dataclass(frozen=True)
class AuthorViews:
    """Total views across all posts of one author."""

    author_id: UserId
    views: int


@dataclass(frozen=True)
class TagCount:
    """Number of posts carrying a tag."""

    name: str
    count: int


class PostRepository(ABC):
    """Repository for Post aggregate.

    Implementations fill the derived ``votes`` and ``comments`` lists on read.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug.

        Args:
            slug: URL slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken."""
        pass

    @abstractmethod
    async def find_recent(
        self,
        tag: Optional[TagName] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first.

        Args:
            tag: Only posts carrying this tag (None for all posts)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count posts, optionally only those carrying a tag."""
        pass

    @abstractmethod
    async def find_most_viewed(self, limit: int) -> List[Post]:
        """Find posts ordered by views descending.

        Args:
            limit: Maximum number of posts to return

        Returns:
            Most viewed posts, newest first among equal view counts
        """
        pass

    @abstractmethod
    async def sum_views_by_author(self, limit: int) -> List[AuthorViews]:
        """Group posts by author and sum their views.

        Args:
            limit: Maximum number of authors to return

        Returns:
            Authors ordered by total views descending
        """
        pass

    @abstractmethod
    async def count_tags(self, limit: Optional[int] = None) -> List[TagCount]:
        """Count how many posts carry each tag.

        Args:
            limit: Maximum number of tags (None for all)

        Returns:
            Tag counts ordered by tag name descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Title, content and tags are written. Views, votes and comments are
        managed by their own operations. ``updated_at`` is refreshed.

        Args:
            post: The post to save

        Returns:
            The saved post as stored
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its comments and votes.

        Returns:
            True if a post was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1.

        Does not touch ``updated_at``.

        Args:
            post_id: The post ID
        """
        pass
