"""Unit tests for VoteUseCase and UnvoteUseCase."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.vote import (
    UnvoteRequest,
    UnvoteUseCase,
    VoteRequest,
    VoteUseCase,
)
from inkwell.domain.error import NotFoundError
from tests.harness import create_env_fixture, make_post, make_user

# Unit test fixture
unit_env = create_env_fixture()


class TestVoteUseCases:
    """Tests for the vote use cases."""

    @pytest.mark.asyncio
    async def test_vote_then_unvote(self, unit_env):
        """A vote can be recorded once and withdrawn once."""
        # Arrange
        vote = await unit_env.get(VoteUseCase)
        unvote = await unit_env.get(UnvoteUseCase)
        user = await make_user(unit_env)
        post = await make_post(unit_env, user, "votable")
        request = {"post_id": str(post.id), "user_id": str(user.id)}

        # Act & Assert
        assert (await vote.execute(VoteRequest(**request))).recorded is True
        assert (await vote.execute(VoteRequest(**request))).recorded is False
        assert (await unvote.execute(UnvoteRequest(**request))).removed is True
        assert (await unvote.execute(UnvoteRequest(**request))).removed is False

    @pytest.mark.asyncio
    async def test_unvote_missing_post_raises(self, unit_env):
        """Unvoting an unknown post raises NotFoundError."""
        unvote = await unit_env.get(UnvoteUseCase)
        user = await make_user(unit_env)

        with pytest.raises(NotFoundError):
            await unvote.execute(
                UnvoteRequest(post_id=str(uuid4()), user_id=str(user.id))
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id_raises_value_error(self, unit_env):
        """Post IDs must be UUIDs."""
        vote = await unit_env.get(VoteUseCase)

        with pytest.raises(ValueError):
            await vote.execute(VoteRequest(post_id="nope", user_id=str(uuid4())))
