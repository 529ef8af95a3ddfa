"""Hot authors use case."""

import logfire

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import UserItem
from inkwell.domain.service import PostService, UserService


class HotAuthorItem(UserItem):
    """Author with total views across their posts."""

    views: int


class HotAuthorsResponse(BaseResponse):
    """Hot authors response."""

    authors: list[HotAuthorItem]


class HotAuthorsUseCase:
    """Use case for ranking authors by the total views of their posts."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize hot authors use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self) -> HotAuthorsResponse:
        """Execute hot authors flow.

        Returns:
            Authors in rank order (may be empty)
        """
        with logfire.span("hot_authors.execute"):
            ranking = await self.post_service.get_top_authors()
            users = await self.user_service.get_by_ids(
                [entry.author_id for entry in ranking]
            )

            authors = [
                HotAuthorItem(
                    **UserItem.from_user(users[entry.author_id]).model_dump(),
                    views=entry.views,
                )
                for entry in ranking
                if entry.author_id in users
            ]

            logfire.info("Hot authors ranked", count=len(authors))
            return HotAuthorsResponse(authors=authors)
