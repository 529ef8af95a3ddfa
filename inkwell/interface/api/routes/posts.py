"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.common import UserSummary
from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from inkwell.domain.error import DomainError
from inkwell.interface.api.auth import session_user
from inkwell.interface.error import to_http_exception, validation_message

router = APIRouter(prefix="/api", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=100000)
    tags: list[str] = Field(default_factory=list, max_length=20)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are kept."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, min_length=1, max_length=100000)
    tags: list[str] | None = Field(default=None, max_length=20)


async def _list_posts(
    list_posts_use_case: ListPostsUseCase, page: int, tag: str | None = None
) -> ListPostsResponse:
    """Run a listing and turn an empty page into a 404."""
    try:
        result = await list_posts_use_case.execute(ListPostsRequest(page=page, tag=tag))
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("List posts validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )

    if not result.posts.docs:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No post.")
    return result


@router.get("/posts", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
) -> ListPostsResponse:
    """List posts newest first, one page at a time.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number

    Returns:
        The page with each post's author populated

    Raises:
        HTTPException: 404 if the page is empty
    """
    return await _list_posts(list_posts_use_case, page)


@router.get("/posts/{page}", response_model=ListPostsResponse)
async def list_posts_page(
    page: int,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ListPostsResponse:
    """Same as ``GET /api/posts`` with the page number in the path."""
    if page < 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Page must be 1 or greater",
        )
    return await _list_posts(list_posts_use_case, page)


@router.get("/tag-posts", response_model=ListPostsResponse)
async def list_tag_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    tag: str = Query(min_length=1, max_length=50),
    page: int = Query(default=1, ge=1),
) -> ListPostsResponse:
    """List posts carrying a tag, newest first.

    Raises:
        HTTPException: 404 if the page is empty
    """
    return await _list_posts(list_posts_use_case, page, tag=tag)


@router.get("/post/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post by slug. Every call counts as one view.

    Args:
        slug: Post slug
        get_post_use_case: Get post use case from DI

    Returns:
        Post with author, comments and comment authors

    Raises:
        HTTPException: 404 if no post has this slug
    """
    try:
        post = await get_post_use_case.execute(GetPostRequest(slug=slug))
    except ValueError:
        # Malformed slug cannot match any post
        post = None
    except Exception as e:
        logfire.error("Unexpected error fetching post", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch post",
        )

    if not post:
        logfire.warn("Post not found", slug=slug)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found."
        )
    return post


@router.post("/post", response_model=CreatePostResponse)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    user: UserSummary = Depends(session_user),
) -> CreatePostResponse:
    """Create a new post authored by the session user.

    Raises:
        HTTPException: 401 without a session, 404 if the session user is gone
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title,
                content=request.content,
                tags=request.tags,
                author_id=user.id,
            )
        )
    except DomainError as e:
        logfire.warn("Post creation domain error", error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.put(
    "/post/{slug}",
    response_model=UpdatePostResponse,
    dependencies=[Depends(session_user)],
)
async def update_post(
    slug: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Update a post's title, content or tags.

    Raises:
        HTTPException: 401 without a session, 404 if no post has this slug
    """
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                slug=slug,
                title=request.title,
                content=request.content,
                tags=request.tags,
            )
        )
    except DomainError as e:
        logfire.warn("Post update domain error", slug=slug, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Post update validation error", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )
    except Exception as e:
        logfire.error("Unexpected error updating post", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete(
    "/post/{slug}",
    response_model=DeletePostResponse,
    dependencies=[Depends(session_user)],
)
async def delete_post(
    slug: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete a post with its comments and votes.

    Raises:
        HTTPException: 401 without a session, 404 if no post has this slug
    """
    try:
        return await delete_post_use_case.execute(DeletePostRequest(slug=slug))
    except DomainError as e:
        raise to_http_exception(e)
