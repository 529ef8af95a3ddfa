"""In-memory comment repository for testing."""

from typing import Optional

from inkwell.domain.model import Comment
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _hydrate(self, comment: Comment) -> Comment:
        replies = sorted(
            (c for c in self._store.comments.values() if c.parent_id == comment.id),
            key=lambda c: c.created_at,
        )
        return comment.model_copy(update={"child": [c.id for c in replies]})

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._store.comments.get(comment_id)
        return self._hydrate(comment) if comment else None

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return [self._hydrate(c) for c in comments]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        existing = self._store.comments.get(comment.id)
        if existing:
            comment = comment.model_copy(
                update={"created_at": existing.created_at, "updated_at": utcnow()}
            )
        self._store.comments[comment.id] = comment.model_copy(update={"child": []})
        return self._hydrate(comment)

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment and its replies."""
        if comment_id not in self._store.comments:
            return False
        self._store.delete_comment_tree(comment_id)
        return True
