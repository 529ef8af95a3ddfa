"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from inkwell.application.usecase.tag import ListTagsResponse, ListTagsUseCase

router = APIRouter(prefix="/api", tags=["tags"], route_class=DishkaRoute)


@router.get("/tags", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
) -> ListTagsResponse:
    """List every tag in use with its post count.

    Args:
        list_tags_use_case: List tags use case from DI

    Returns:
        Tags by name descending
    """
    return await list_tags_use_case.execute()
