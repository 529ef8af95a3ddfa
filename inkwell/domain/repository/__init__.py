"""Repository interfaces for the Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.post import (
    AuthorViews,
    PostRepository,
    TagCount,
)
from inkwell.domain.repository.session import SessionRepository
from inkwell.domain.repository.user import UserRepository
from inkwell.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
    "SessionRepository",
    "AuthorViews",
    "TagCount",
]
