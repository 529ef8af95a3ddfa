"""In-memory post repository for testing."""

from collections import Counter
from typing import Optional

from inkwell.domain.model import Post
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository.post import (
    AuthorViews,
    PostRepository,
    TagCount,
)
from inkwell.domain.value import PostId, Slug, TagName

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _hydrate(self, post: Post) -> Post:
        comments = sorted(
            (c for c in self._store.comments.values() if c.post_id == post.id),
            key=lambda c: c.created_at,
        )
        return post.model_copy(
            update={
                "votes": [
                    user_id
                    for user_id, voted_post_id in self._store.votes
                    if voted_post_id == post.id
                ],
                "comments": [c.id for c in comments],
            }
        )

    def _matching(self, tag: Optional[TagName]) -> list[Post]:
        posts = list(self._store.posts.values())
        if tag is not None:
            posts = [p for p in posts if tag in p.tags]
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        post = self._store.posts.get(post_id)
        return self._hydrate(post) if post else None

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._store.posts.values():
            if post.slug == slug:
                return self._hydrate(post)
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is taken."""
        return any(post.slug == slug for post in self._store.posts.values())

    async def find_recent(
        self,
        tag: Optional[TagName] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest first."""
        # Reverse insertion order first so equal timestamps list the latest insert first
        posts = list(reversed(self._matching(tag)))
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return [self._hydrate(p) for p in posts[offset : offset + limit]]

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count posts."""
        return len(self._matching(tag))

    async def find_most_viewed(self, limit: int) -> list[Post]:
        """Find posts ordered by views descending."""
        posts = list(reversed(self._matching(None)))
        posts.sort(key=lambda p: (p.views, p.created_at), reverse=True)
        return [self._hydrate(p) for p in posts[:limit]]

    async def sum_views_by_author(self, limit: int) -> list[AuthorViews]:
        """Group posts by author and sum their views."""
        totals: Counter = Counter()
        for post in self._store.posts.values():
            totals[post.author_id] += post.views

        ranked = sorted(totals.items(), key=lambda item: (-item[1], str(item[0])))
        return [
            AuthorViews(author_id=author_id, views=views)
            for author_id, views in ranked[:limit]
        ]

    async def count_tags(self, limit: Optional[int] = None) -> list[TagCount]:
        """Count how many posts carry each tag, by name descending."""
        counts: Counter = Counter(
            tag.root for post in self._store.posts.values() for tag in post.tags
        )

        ranked = sorted(counts.items(), key=lambda item: item[0], reverse=True)

        if limit is not None:
            ranked = ranked[:limit]
        return [TagCount(name=name, count=count) for name, count in ranked]

    async def save(self, post: Post) -> Post:
        """Save a post. Views and authorship are kept on update."""
        existing = self._store.posts.get(post.id)
        if existing:
            post = post.model_copy(
                update={
                    "created_at": existing.created_at,
                    "views": existing.views,
                    "author_id": existing.author_id,
                    "updated_at": utcnow(),
                }
            )
        self._store.posts[post.id] = post.model_copy(
            update={"votes": [], "comments": []}
        )
        return self._hydrate(post)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its comments and votes."""
        if self._store.posts.pop(post_id, None) is None:
            return False

        for comment_id in [
            c.id for c in self._store.comments.values() if c.post_id == post_id
        ]:
            self._store.comments.pop(comment_id, None)
        self._store.votes = [v for v in self._store.votes if v[1] != post_id]
        return True

    async def increment_views(self, post_id: PostId) -> None:
        """Increment the view counter by 1."""
        post = self._store.posts.get(post_id)
        if post:
            self._store.posts[post_id] = post.model_copy(
                update={"views": post.views + 1}
            )
