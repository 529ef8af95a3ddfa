"""Hot tags use case."""

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import TagItem
from inkwell.domain.service import PostService


class HotTagsResponse(BaseResponse):
    """Hot tags response."""

    tags: list[TagItem]


class HotTagsUseCase:
    """Use case for listing the most used tags."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self) -> HotTagsResponse:
        """Return tags by post count descending, then name."""
        tags = await self.post_service.get_hot_tags()
        return HotTagsResponse(
            tags=[TagItem(name=tag.name, count=tag.count) for tag in tags]
        )
