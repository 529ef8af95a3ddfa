"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import CommentItem
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import CommentService, PostService, UserService
from inkwell.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from session
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseResponse):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the post and the author exist
        2. Create comment via comment service (validates parent if replying)

        Args:
            request: Create comment request

        Returns:
            The created comment with its author

        Raises:
            NotFoundError: If the post, the author or the parent comment is missing
            ValidationError: If the parent comment belongs to another post
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span("create_comment.execute", post_id=str(post_id)):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))

            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

            comment = await self.comment_service.create_comment(
                post_id=post_id,
                author_id=author.id,
                content=request.content,
                parent_id=(
                    CommentId(UUID(request.parent_id)) if request.parent_id else None
                ),
            )

            return CreateCommentResponse(
                comment=CommentItem.from_comment(comment, author)
            )
