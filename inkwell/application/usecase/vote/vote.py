"""Vote use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.domain.service import VoteService
from inkwell.domain.value import PostId, UserId


class VoteRequest(BaseModel):
    """Vote request."""

    post_id: str  # UUID string
    user_id: str  # User ID from session


class VoteResponse(BaseResponse):
    """Vote response."""

    recorded: bool  # False when the user had already voted


class VoteUseCase:
    """Use case for voting on a post."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            Whether a new vote was recorded

        Raises:
            NotFoundError: If the post or the user does not exist
        """
        recorded = await self.vote_service.vote(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
        return VoteResponse(recorded=recorded)
