"""Get post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import CommentItem, PostItem
from inkwell.domain.service import CommentService, PostService, UserService
from inkwell.domain.value import Slug


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str


class GetPostResponse(BaseResponse):
    """Get post response.

    ``post.comments`` keeps the comment IDs; ``comments`` carries the
    populated comments, oldest first.
    """

    post: PostItem
    comments: list[CommentItem]


class GetPostUseCase:
    """Use case for reading a single post. Each read counts as one view."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> Optional[GetPostResponse]:
        """Execute get post flow.

        Steps:
        1. Find the post by slug
        2. Increment its view counter
        3. Populate the author, the comments and the comment authors

        Args:
            request: Get post request with slug

        Returns:
            Post details if found, None otherwise

        Raises:
            ValueError: If the slug is malformed
        """
        with logfire.span("get_post.execute", slug=request.slug):
            post = await self.post_service.get_post_by_slug(Slug(request.slug))
            if not post:
                return None

            post = await self.post_service.record_view(post)
            comments = await self.comment_service.get_comments_for_post(post.id)

            users = await self.user_service.get_by_ids(
                [post.author_id] + [comment.author_id for comment in comments]
            )

            return GetPostResponse(
                post=PostItem.from_post(post, users.get(post.author_id)),
                comments=[
                    CommentItem.from_comment(comment, users.get(comment.author_id))
                    for comment in comments
                ],
            )
