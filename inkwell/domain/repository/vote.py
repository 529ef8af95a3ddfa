"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List

from inkwell.domain.value import PostId, UserId


class VoteRepository(ABC):
    """Repository for (user, post) vote pairs.

    A single pair backs both ``User.score`` and ``Post.votes``.
    """

    @abstractmethod
    async def exists(self, user_id: UserId, post_id: PostId) -> bool:
        """Check whether the user has voted on the post."""
        pass

    @abstractmethod
    async def add(self, user_id: UserId, post_id: PostId) -> bool:
        """Record a vote.

        Returns:
            True if recorded, False if the pair already existed
        """
        pass

    @abstractmethod
    async def remove(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a vote.

        Returns:
            True if a vote was removed, False if none existed
        """
        pass

    @abstractmethod
    async def find_voters(self, post_id: PostId) -> List[UserId]:
        """Users who voted on a post, oldest vote first."""
        pass

    @abstractmethod
    async def find_voted_posts(self, user_id: UserId) -> List[PostId]:
        """Posts a user voted on, oldest vote first."""
        pass
