"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.user import User
from inkwell.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Implementations fill the derived ``posts`` and ``score`` lists on read.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The unique username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query.

        Args:
            user_ids: IDs to load

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        ``created_at`` is kept from the first save and ``updated_at`` is
        refreshed on every save.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
