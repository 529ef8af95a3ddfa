"""Hot content routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from inkwell.application.usecase.hot import (
    HotAuthorsResponse,
    HotAuthorsUseCase,
    HotPostsResponse,
    HotPostsUseCase,
    HotTagsResponse,
    HotTagsUseCase,
)

router = APIRouter(prefix="/api", tags=["hot"], route_class=DishkaRoute)


@router.get("/hot-authors", response_model=HotAuthorsResponse)
async def hot_authors(
    hot_authors_use_case: FromDishka[HotAuthorsUseCase],
) -> HotAuthorsResponse:
    """Authors ranked by the total views of their posts.

    Raises:
        HTTPException: 404 if nobody has posted yet
    """
    result = await hot_authors_use_case.execute()
    if not result.authors:
        logfire.info("No authors to rank")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No author.")
    return result


@router.get("/hot-posts", response_model=HotPostsResponse)
async def hot_posts(
    hot_posts_use_case: FromDishka[HotPostsUseCase],
) -> HotPostsResponse:
    """The most viewed posts."""
    return await hot_posts_use_case.execute()


@router.get("/hot-tags", response_model=HotTagsResponse)
async def hot_tags(
    hot_tags_use_case: FromDishka[HotTagsUseCase],
) -> HotTagsResponse:
    """The most used tags."""
    return await hot_tags_use_case.execute()
