"""Hot posts use case."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.domain.service import PostService


class HotPostItem(BaseModel):
    """Projection of a post for the hot list."""

    id: str
    slug: str
    title: str
    views: int
    created_at: datetime
    updated_at: datetime


class HotPostsResponse(BaseResponse):
    """Hot posts response."""

    posts: list[HotPostItem]


class HotPostsUseCase:
    """Use case for listing the most viewed posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self) -> HotPostsResponse:
        """Return the most viewed posts, views descending."""
        posts = await self.post_service.get_most_viewed()
        return HotPostsResponse(
            posts=[
                HotPostItem(
                    id=str(post.id),
                    slug=str(post.slug),
                    title=post.title,
                    views=post.views,
                    created_at=post.created_at,
                    updated_at=post.updated_at,
                )
                for post in posts
            ]
        )
