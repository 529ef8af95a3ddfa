"""Unit tests for ListPostsUseCase."""

import pytest

from inkwell.application.usecase.post import ListPostsRequest, ListPostsUseCase
from tests.harness import create_env_fixture, make_post, make_user

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestListPosts:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_list_posts_builds_page_with_authors(self, unit_env):
        """Docs should carry their author and the page metadata."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        for i in range(3):
            await make_post(unit_env, alice, f"alice-{i}")
        for i in range(3):
            await make_post(unit_env, bob, f"bob-{i}")

        # Act
        result = await use_case.execute(ListPostsRequest(page=1))

        # Assert
        page = result.posts
        assert result.ok is True
        assert (page.total, page.limit, page.page, page.pages) == (6, 5, 1, 2)
        assert len(page.docs) == 5
        assert page.docs[0].slug == "bob-2"
        assert page.docs[0].author.username == "bob"
        assert page.docs[-1].author.username == "alice"

    @pytest.mark.asyncio
    async def test_list_posts_past_last_page_is_empty(self, unit_env):
        """A page past the end has no docs but keeps the totals."""
        use_case = await unit_env.get(ListPostsUseCase)
        author = await make_user(unit_env)
        await make_post(unit_env, author, "only")

        result = await use_case.execute(ListPostsRequest(page=3))

        assert result.posts.docs == []
        assert result.posts.total == 1
        assert result.posts.pages == 1

    @pytest.mark.asyncio
    async def test_list_posts_by_tag(self, unit_env):
        """The tag filter applies to docs and totals."""
        use_case = await unit_env.get(ListPostsUseCase)
        author = await make_user(unit_env)
        await make_post(unit_env, author, "python-post", tags=["python"])
        await make_post(unit_env, author, "rust-post", tags=["rust"])

        result = await use_case.execute(ListPostsRequest(page=1, tag="rust"))

        assert [doc.slug for doc in result.posts.docs] == ["rust-post"]
        assert result.posts.total == 1
