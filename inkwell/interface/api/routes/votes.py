"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from inkwell.application.usecase.common import UserSummary
from inkwell.application.usecase.vote import (
    UnvoteRequest,
    UnvoteResponse,
    UnvoteUseCase,
    VoteRequest,
    VoteResponse,
    VoteUseCase,
)
from inkwell.domain.error import DomainError
from inkwell.interface.api.auth import session_user
from inkwell.interface.error import to_http_exception, validation_message

router = APIRouter(prefix="/api", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request naming the post to vote on."""

    post_id: UUID


@router.post("/post/vote", response_model=VoteResponse)
async def vote(
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    user: UserSummary = Depends(session_user),
) -> VoteResponse:
    """Vote on a post as the session user.

    Voting twice keeps a single vote.

    Args:
        request: Post to vote on
        vote_use_case: Vote use case from DI
        user: Session user

    Returns:
        Whether a new vote was recorded

    Raises:
        HTTPException: 401 without a session, 404 if the post or user is missing
    """
    try:
        return await vote_use_case.execute(
            VoteRequest(post_id=str(request.post_id), user_id=user.id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )


@router.post("/post/unvote", response_model=UnvoteResponse)
async def unvote(
    request: VoteAPIRequest,
    unvote_use_case: FromDishka[UnvoteUseCase],
    user: UserSummary = Depends(session_user),
) -> UnvoteResponse:
    """Withdraw the session user's vote from a post.

    Unvoting a post that was never voted on is a no-op.

    Raises:
        HTTPException: 401 without a session, 404 if the post or user is missing
    """
    try:
        return await unvote_use_case.execute(
            UnvoteRequest(post_id=str(request.post_id), user_id=user.id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )
