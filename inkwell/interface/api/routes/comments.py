"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from inkwell.application.usecase.common import UserSummary
from inkwell.domain.error import DomainError
from inkwell.interface.api.auth import session_user
from inkwell.interface.error import to_http_exception, validation_message

router = APIRouter(prefix="/api", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: UUID
    content: str = Field(min_length=1, max_length=10000)
    parent_id: UUID | None = None  # Reply to this comment


@router.post("/post/comment", response_model=CreateCommentResponse)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    user: UserSummary = Depends(session_user),
) -> CreateCommentResponse:
    """Comment on a post, or reply to a comment, as the session user.

    Args:
        request: Comment data
        create_comment_use_case: Create comment use case from DI
        user: Session user

    Returns:
        Created comment

    Raises:
        HTTPException: 401 without a session, 404 if the post or parent is
            missing, 400 if the parent belongs to another post
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(request.post_id),
                content=request.content,
                author_id=user.id,
                parent_id=str(request.parent_id) if request.parent_id else None,
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation domain error", error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )


@router.delete(
    "/post/comment",
    response_model=DeleteCommentResponse,
    dependencies=[Depends(session_user)],
)
async def delete_comment(
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    comment_id: UUID = Query(),
) -> DeleteCommentResponse:
    """Delete a comment and its replies.

    Raises:
        HTTPException: 401 without a session, 404 if the comment is missing
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id))
        )
    except DomainError as e:
        raise to_http_exception(e)
