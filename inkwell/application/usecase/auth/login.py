"""Login use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import UserSummary
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import AuthService, SessionService
from inkwell.domain.value import Username


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseResponse):
    """Login response.

    The session token and expiry go into the cookie, not the body.
    """

    user: UserSummary
    token: str | None = Field(default=None, exclude=True)
    expires_at: datetime | None = Field(default=None, exclude=True)


class LoginUseCase:
    """Use case for password login."""

    def __init__(
        self, auth_service: AuthService, session_service: SessionService
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            session_service: Session domain service
        """
        self.auth_service = auth_service
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Check the username and password
        2. Open a server-side session for the user

        Args:
            request: Login request

        Returns:
            Login response with the session token

        Raises:
            NotFoundError: If no user has this username or it is malformed
            InvalidCredentialsError: If the password does not match
        """
        with logfire.span("login.execute", username=request.username):
            try:
                username = Username(request.username)
            except ValueError:
                # No account can have a malformed username
                raise NotFoundError("User", request.username) from None

            user = await self.auth_service.authenticate(username, request.password)
            session = await self.session_service.open_session(user)

            return LoginResponse(
                user=UserSummary.from_session(session),
                token=session.token,
                expires_at=session.expires_at,
            )
