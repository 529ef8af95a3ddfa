"""Update post use case."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import PostItem
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import PostService
from inkwell.domain.value import Slug, TagName


class UpdatePostRequest(BaseModel):
    """Update post request. Fields left as None are kept."""

    slug: str
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None


class UpdatePostResponse(BaseResponse):
    """Update post response."""

    post: PostItem


class UpdatePostUseCase:
    """Use case for editing a post's title, content or tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If no post has this slug
            ValueError: If a field fails validation
        """
        with logfire.span("update_post.execute", slug=request.slug):
            try:
                slug = Slug(request.slug)
            except ValueError:
                # Malformed slug cannot match any post
                raise NotFoundError("Post", request.slug) from None

            post = await self.post_service.update_post(
                slug=slug,
                title=request.title,
                content=request.content,
                tags=(
                    [TagName(tag) for tag in request.tags]
                    if request.tags is not None
                    else None
                ),
            )

            return UpdatePostResponse(post=PostItem.from_post(post))
