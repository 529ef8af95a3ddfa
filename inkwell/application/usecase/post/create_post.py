"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import PostItem
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import TagName, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    author_id: str  # User ID from session


class CreatePostResponse(BaseResponse):
    """Create post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post with its author

        Raises:
            NotFoundError: If the author no longer exists
            ValueError: If a field fails validation
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            # Raises NotFoundError for a session whose user was removed
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

            post = await self.post_service.create_post(
                author_id=author.id,
                title=request.title,
                content=request.content,
                tags=[TagName(tag) for tag in request.tags],
            )

            return CreatePostResponse(post=PostItem.from_post(post, author))
