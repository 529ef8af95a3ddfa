"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.comment import PostgresCommentRepository
from inkwell.persistence.repository.post import PostgresPostRepository
from inkwell.persistence.repository.session import PostgresSessionRepository
from inkwell.persistence.repository.user import PostgresUserRepository
from inkwell.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresSessionRepository",
]
