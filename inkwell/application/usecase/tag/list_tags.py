"""List tags use case."""

import logfire

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import TagItem
from inkwell.domain.service import PostService


class ListTagsResponse(BaseResponse):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing every tag in use."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list tags use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            All tags with their post counts, by name descending
        """
        with logfire.span("list_tags.execute"):
            tags = await self.post_service.get_all_tags()

            tag_items = [TagItem(name=tag.name, count=tag.count) for tag in tags]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
