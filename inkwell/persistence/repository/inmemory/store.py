"""Shared state for the in-memory repositories.

Derived lists (a user's posts and votes, a post's votes and comments, a
comment's replies) are computed from this state on read, the same way the
PostgreSQL repositories compute them from foreign keys.
"""

from inkwell.domain.model import Comment, Post, User, UserSession
from inkwell.domain.value import CommentId, PostId, UserId


class InMemoryStore:
    """Rows of every table, keyed by primary key."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.votes: list[tuple[UserId, PostId]] = []  # Oldest first
        self.sessions: dict[str, UserSession] = {}

    def delete_comment_tree(self, comment_id: CommentId) -> None:
        """Delete a comment and all of its replies."""
        replies = [c.id for c in self.comments.values() if c.parent_id == comment_id]
        for reply_id in replies:
            self.delete_comment_tree(reply_id)
        self.comments.pop(comment_id, None)
