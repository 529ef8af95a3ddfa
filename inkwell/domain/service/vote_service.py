"""Vote domain service."""

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import VoteRepository
from inkwell.domain.value import PostId, UserId

from .base import Service
from .post_service import PostService
from .user_service import UserService


class VoteService(Service):
    """Domain service for vote operations.

    A vote is a single (user, post) record, so the voter's score list and
    the post's votes list can never disagree.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.user_service = user_service

    async def _check_targets(self, post_id: PostId, user_id: UserId) -> None:
        """Ensure both the post and the voter exist."""
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        await self.user_service.get_by_id(user_id)  # Raises NotFoundError

    async def vote(self, post_id: PostId, user_id: UserId) -> bool:
        """Vote on a post.

        Voting again on the same post is a no-op.

        Args:
            post_id: Post ID
            user_id: Voting user ID

        Returns:
            True if a new vote was recorded, False if it already existed

        Raises:
            NotFoundError: If the post or the user does not exist
        """
        with logfire.span("vote_service.vote", post_id=str(post_id), user_id=str(user_id)):
            await self._check_targets(post_id, user_id)

            if await self.vote_repository.exists(user_id, post_id):
                logfire.info(
                    "Vote already recorded", post_id=str(post_id), user_id=str(user_id)
                )
                return False

            added = await self.vote_repository.add(user_id, post_id)
            logfire.info("Vote recorded", post_id=str(post_id), user_id=str(user_id))
            return added

    async def unvote(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a vote from a post.

        Args:
            post_id: Post ID
            user_id: Voting user ID

        Returns:
            True if a vote was removed, False if there was none

        Raises:
            NotFoundError: If the post or the user does not exist
        """
        with logfire.span(
            "vote_service.unvote", post_id=str(post_id), user_id=str(user_id)
        ):
            await self._check_targets(post_id, user_id)

            removed = await self.vote_repository.remove(user_id, post_id)
            if removed:
                logfire.info("Vote removed", post_id=str(post_id), user_id=str(user_id))
            else:
                logfire.info(
                    "No vote to remove", post_id=str(post_id), user_id=str(user_id)
                )
            return removed
