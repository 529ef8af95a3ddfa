"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId
from tests.harness import create_env_fixture, make_post, make_user

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_is_listed_on_post(self, unit_env):
        """New comments should show up in the post's comment list."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "discussed")

        # Act
        comment = await comment_service.create_comment(
            post_id=post.id, author_id=author.id, content="Nice post"
        )

        # Assert
        assert comment.parent_id is None
        assert (await post_repo.find_by_id(post.id)).comments == [comment.id]

    @pytest.mark.asyncio
    async def test_reply_is_listed_as_child_of_parent(self, unit_env):
        """A reply should appear in its parent's child list."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "discussed")
        parent = await comment_service.create_comment(post.id, author.id, "Parent")

        reply = await comment_service.create_comment(
            post.id, author.id, "Reply", parent_id=parent.id
        )

        assert (await comment_repo.find_by_id(parent.id)).child == [reply.id]

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises_not_found(self, unit_env):
        """Replying to an unknown comment should raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "discussed")

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment(
                post.id, author.id, "Reply", parent_id=CommentId(uuid4())
            )

        assert exc_info.value.resource == "Comment"

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_post_raises(self, unit_env):
        """The parent must belong to the same post."""
        comment_service = await unit_env.get(CommentService)
        author = await make_user(unit_env)
        first = await make_post(unit_env, author, "first")
        second = await make_post(unit_env, author, "second")
        parent = await comment_service.create_comment(first.id, author.id, "Parent")

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                second.id, author.id, "Reply", parent_id=parent.id
            )


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_comment_removes_replies(self, unit_env):
        """Deleting a comment should delete its replies too."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = await make_user(unit_env)
        post = await make_post(unit_env, author, "discussed")
        parent = await comment_service.create_comment(post.id, author.id, "Parent")
        reply = await comment_service.create_comment(
            post.id, author.id, "Reply", parent_id=parent.id
        )

        await comment_service.delete_comment(parent.id)

        assert await comment_repo.find_by_id(parent.id) is None
        assert await comment_repo.find_by_id(reply.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        """Deleting an unknown comment should raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()))
