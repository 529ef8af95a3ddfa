"""Delete post use case."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import PostService
from inkwell.domain.value import Slug


class DeletePostRequest(BaseModel):
    """Delete post request."""

    slug: str


class DeletePostResponse(BaseResponse):
    """Delete post response."""

    pass


class DeletePostUseCase:
    """Use case for deleting a post along with its comments and votes."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("delete_post.execute", slug=request.slug):
            try:
                slug = Slug(request.slug)
            except ValueError:
                raise NotFoundError("Post", request.slug) from None

            await self.post_service.delete_post(slug)
            return DeletePostResponse()
