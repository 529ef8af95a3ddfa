"""Unvote use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.domain.service import VoteService
from inkwell.domain.value import PostId, UserId


class UnvoteRequest(BaseModel):
    """Unvote request."""

    post_id: str  # UUID string
    user_id: str  # User ID from session


class UnvoteResponse(BaseResponse):
    """Unvote response."""

    removed: bool  # False when there was no vote to remove


class UnvoteUseCase:
    """Use case for withdrawing a vote from a post."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize unvote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: UnvoteRequest) -> UnvoteResponse:
        """Execute unvote flow.

        Raises:
            NotFoundError: If the post or the user does not exist
        """
        removed = await self.vote_service.unvote(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
        return UnvoteResponse(removed=removed)
