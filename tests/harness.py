"""Test harness shared by unit, API and integration tests.

Integration tests assume PostgreSQL is already running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

from uuid import uuid4

import pytest_asyncio
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from inkwell.domain.model import Post, User
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.value import PostId, Slug, TagName, UserId, Username
from inkwell.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


async def make_user(env: AsyncContainer, username: str = "alice") -> User:
    """Save a user straight through the repository.

    The password hash is a placeholder, so the user cannot log in.
    """
    user_repo = await env.get(UserRepository)
    return await user_repo.save(
        User(
            id=UserId(uuid4()),
            username=Username(username),
            password_hash="not-a-real-hash",
        )
    )


async def make_post(
    env: AsyncContainer,
    author: User,
    slug: str,
    views: int = 0,
    tags: list[str] | None = None,
) -> Post:
    """Save a post straight through the repository."""
    post_repo = await env.get(PostRepository)
    return await post_repo.save(
        Post(
            id=PostId(uuid4()),
            slug=Slug(slug),
            title=slug.replace("-", " ").title(),
            content=f"Content of {slug}",
            tags=[TagName(tag) for tag in tags or []],
            author_id=author.id,
            views=views,
        )
    )


def register_and_login(
    client: TestClient, username: str = "alice", password: str = "secret-pass"
) -> dict:
    """Register a user and log in, leaving the session cookie on the client.

    Returns:
        The logged-in user as returned by the API
    """
    response = client.post("/register", json={"username": username, "password": password})
    assert response.status_code == 200, response.text

    response = client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["user"]


def create_post(
    client: TestClient, title: str, content: str = "Body", tags: list[str] | None = None
) -> dict:
    """Create a post as the logged-in user and return it."""
    response = client.post(
        "/api/post",
        json={"title": title, "content": content, "tags": tags or []},
    )
    assert response.status_code == 200, response.text
    return response.json()["post"]
