"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import PostItem, PostPage
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import TagName


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    tag: str | None = None  # Filter by tag name


class ListPostsResponse(BaseResponse):
    """List posts response."""

    posts: PostPage


class ListPostsUseCase:
    """Use case for paging through posts, newest first."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with page and optional tag

        Returns:
            The requested page, each post with its author populated. The page
            may be empty.
        """
        with logfire.span("list_posts.execute", page=request.page, tag=request.tag):
            tag_filter = TagName(request.tag) if request.tag else None

            posts, total = await self.post_service.list_recent(
                page=request.page, tag=tag_filter
            )

            # Batch-load authors to avoid one query per post
            authors = await self.user_service.get_by_ids(
                [post.author_id for post in posts]
            )

            docs = [
                PostItem.from_post(post, authors.get(post.author_id)) for post in posts
            ]

            return ListPostsResponse(
                posts=PostPage(
                    docs=docs,
                    total=total,
                    limit=self.post_service.content_settings.page_size,
                    page=request.page,
                    pages=self.post_service.page_count(total),
                )
            )
