"""Domain model entities for Inkwell."""

from inkwell.domain.model.comment import Comment
from inkwell.domain.model.post import Post
from inkwell.domain.model.session import UserSession
from inkwell.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "UserSession",
]
