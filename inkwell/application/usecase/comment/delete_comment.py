"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string


class DeleteCommentResponse(BaseResponse):
    """Delete comment response."""

    pass


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.delete_comment(CommentId(UUID(request.comment_id)))
        return DeleteCommentResponse()
