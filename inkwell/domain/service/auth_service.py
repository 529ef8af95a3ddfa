"""Authentication domain service.

Handles registration and password login. Passwords are hashed with bcrypt
before they reach the repository and are never returned to callers.
"""

from uuid import uuid4

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.error import (
    InvalidCredentialsError,
    NotFoundError,
    UserAlreadyExistsError,
)
from inkwell.domain.model import User
from inkwell.domain.value import UserId, Username
from inkwell.util.password import hash_password, verify_password

from .base import Service
from .user_service import UserService


class AuthService(Service):
    """Domain service for registration and login."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def register(
        self, username: Username, password: str, email: str | None = None
    ) -> User:
        """Register a new user.

        Args:
            username: Desired username
            password: Plaintext password
            email: Optional email address

        Returns:
            Created user

        Raises:
            UserAlreadyExistsError: If the username is taken
        """
        with logfire.span("auth_service.register", username=username.root):
            existing = await self.user_service.get_by_username(username)
            if existing:
                logfire.warn("Username already taken", username=username.root)
                raise UserAlreadyExistsError(username.root)

            user = User(
                id=UserId(uuid4()),
                username=username,
                password_hash=hash_password(password, self.auth_settings),
                email=email,
            )
            saved = await self.user_service.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), username=username.root
            )
            return saved

    async def authenticate(self, username: Username, password: str) -> User:
        """Check a username and password.

        Args:
            username: Username
            password: Plaintext password

        Returns:
            The authenticated user

        Raises:
            NotFoundError: If no user has this username
            InvalidCredentialsError: If the password does not match
        """
        with logfire.span("auth_service.authenticate", username=username.root):
            user = await self.user_service.get_by_username(username)
            if not user:
                raise NotFoundError("User", username.root)

            if not verify_password(password, user.password_hash):
                logfire.warn("Wrong password", username=username.root)
                raise InvalidCredentialsError(username.root)

            logfire.info("User authenticated", user_id=str(user.id))
            return user
