"""Unit tests for the in-memory post repository's derived fields."""

import pytest

from inkwell.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from inkwell.domain.service import CommentService
from tests.harness import create_env_fixture, make_post, make_user

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestPostDerivedFields:
    """Votes, comments and authorship are derived from the stored rows."""

    @pytest.mark.asyncio
    async def test_save_keeps_views_and_author_on_update(self, unit_env):
        """Updating a post must not reset its counter or change its owner."""
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env, "author")
        other = await make_user(unit_env, "other")
        post = await make_post(unit_env, author, "counted", views=9)

        updated = await post_repo.save(
            post.model_copy(update={"title": "New", "views": 0, "author_id": other.id})
        )

        assert updated.title == "New"
        assert updated.views == 9
        assert updated.author_id == author.id
        assert updated.created_at == post.created_at

    @pytest.mark.asyncio
    async def test_user_posts_lists_authored_posts(self, unit_env):
        """A user's posts list follows the posts' author_id."""
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(unit_env)
        first = await make_post(unit_env, author, "first")
        second = await make_post(unit_env, author, "second")

        stored = await user_repo.find_by_id(author.id)

        assert stored.posts == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_delete_post_cascades_to_comments_and_votes(self, unit_env):
        """Deleting a post removes its comments and every vote on it."""
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "doomed")
        comment = await comment_service.create_comment(post.id, author.id, "Bye")
        await vote_repo.add(author.id, post.id)

        deleted = await post_repo.delete(post.id)

        assert deleted is True
        assert await comment_repo.find_by_id(comment.id) is None
        assert await vote_repo.find_voters(post.id) == []
        assert (await user_repo.find_by_id(author.id)).score == []
        assert await post_repo.delete(post.id) is False

    @pytest.mark.asyncio
    async def test_vote_add_is_idempotent(self, unit_env):
        """Adding the same vote twice keeps one row."""
        vote_repo = await unit_env.get(VoteRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "votable")

        assert await vote_repo.add(author.id, post.id) is True
        assert await vote_repo.add(author.id, post.id) is False
        assert await vote_repo.find_voted_posts(author.id) == [post.id]
