"""Unit tests for GetPostUseCase."""

import pytest

from inkwell.application.usecase.post import GetPostRequest, GetPostUseCase
from inkwell.domain.service import CommentService
from tests.harness import create_env_fixture, make_post, make_user

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetPost:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_post_counts_a_view_per_read(self, unit_env):
        """Every read should add exactly one view."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        author = await make_user(unit_env)
        await make_post(unit_env, author, "popular", views=10)

        # Act
        first = await use_case.execute(GetPostRequest(slug="popular"))
        second = await use_case.execute(GetPostRequest(slug="popular"))

        # Assert
        assert first.post.views == 11
        assert second.post.views == 12

    @pytest.mark.asyncio
    async def test_get_post_populates_author_and_comments(self, unit_env):
        """The author and each comment author should be populated."""
        use_case = await unit_env.get(GetPostUseCase)
        comment_service = await unit_env.get(CommentService)
        author = await make_user(unit_env, "author")
        commenter = await make_user(unit_env, "commenter")
        post = await make_post(unit_env, author, "discussed")
        comment = await comment_service.create_comment(post.id, commenter.id, "Hi")

        result = await use_case.execute(GetPostRequest(slug="discussed"))

        assert result.post.author.username == "author"
        assert result.post.author.posts == [str(post.id)]
        assert result.post.comments == [str(comment.id)]
        assert [c.author.username for c in result.comments] == ["commenter"]

    @pytest.mark.asyncio
    async def test_get_missing_post_returns_none(self, unit_env):
        """An unknown slug should return None."""
        use_case = await unit_env.get(GetPostUseCase)

        result = await use_case.execute(GetPostRequest(slug="missing"))

        assert result is None
