"""In-memory user repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.model import User
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _hydrate(self, user: User) -> User:
        posts = sorted(
            (p for p in self._store.posts.values() if p.author_id == user.id),
            key=lambda p: p.created_at,
        )
        return user.model_copy(
            update={
                "posts": [p.id for p in posts],
                "score": [
                    post_id
                    for voter_id, post_id in self._store.votes
                    if voter_id == user.id
                ],
            }
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        user = self._store.users.get(user_id)
        return self._hydrate(user) if user else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._store.users.values():
            if user.username == username:
                return self._hydrate(user)
        return None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users."""
        return [
            self._hydrate(self._store.users[user_id])
            for user_id in dict.fromkeys(user_ids)
            if user_id in self._store.users
        ]

    async def save(self, user: User) -> User:
        """Save a user."""
        existing = self._store.users.get(user.id)
        if existing:
            user = user.model_copy(
                update={"created_at": existing.created_at, "updated_at": utcnow()}
            )
        self._store.users[user.id] = user.model_copy(update={"posts": [], "score": []})
        return self._hydrate(user)
