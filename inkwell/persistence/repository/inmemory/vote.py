"""In-memory vote repository for testing."""

from inkwell.domain.repository import VoteRepository
from inkwell.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def exists(self, user_id: UserId, post_id: PostId) -> bool:
        """Check whether the user has voted on the post."""
        return (user_id, post_id) in self._store.votes

    async def add(self, user_id: UserId, post_id: PostId) -> bool:
        """Record a vote unless the pair already exists."""
        if (user_id, post_id) in self._store.votes:
            return False
        self._store.votes.append((user_id, post_id))
        return True

    async def remove(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a vote."""
        if (user_id, post_id) not in self._store.votes:
            return False
        self._store.votes.remove((user_id, post_id))
        return True

    async def find_voters(self, post_id: PostId) -> list[UserId]:
        """Users who voted on a post."""
        return [u for u, p in self._store.votes if p == post_id]

    async def find_voted_posts(self, user_id: UserId) -> list[PostId]:
        """Posts a user voted on."""
        return [p for u, p in self._store.votes if u == user_id]
