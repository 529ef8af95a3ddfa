"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .session import InMemorySessionRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemorySessionRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
