"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import User
from inkwell.domain.service import UserService
from inkwell.domain.value import UserId, Username
from inkwell.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryUserRepository,
)


def _user(username: str) -> User:
    return User(id=UserId(uuid4()), username=Username(username), password_hash="x")


class TestUserLookups:
    """Tests for UserService lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_returns_saved_user(self):
        """Should return the user saved under the ID."""
        # Arrange
        service = UserService(InMemoryUserRepository(InMemoryStore()))
        user = await service.save(_user("alice"))

        # Act
        found = await service.get_by_id(user.id)

        # Assert
        assert found.username == Username("alice")

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises_not_found(self):
        """Unknown IDs raise NotFoundError naming the user resource."""
        service = UserService(InMemoryUserRepository(InMemoryStore()))

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_id(UserId(uuid4()))

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_get_by_username(self):
        """Lookup by username returns None when nobody has it."""
        service = UserService(InMemoryUserRepository(InMemoryStore()))
        await service.save(_user("alice"))

        assert (await service.get_by_username(Username("alice"))) is not None
        assert (await service.get_by_username(Username("bob"))) is None

    @pytest.mark.asyncio
    async def test_get_by_ids_skips_unknown_and_duplicates(self):
        """Batch lookup returns a dict keyed by the IDs that exist."""
        service = UserService(InMemoryUserRepository(InMemoryStore()))
        alice = await service.save(_user("alice"))
        bob = await service.save(_user("bob"))

        users = await service.get_by_ids([alice.id, bob.id, alice.id, UserId(uuid4())])

        assert set(users) == {alice.id, bob.id}
        assert users[bob.id].username == Username("bob")
