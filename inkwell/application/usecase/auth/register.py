"""Register use case."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import UserSummary
from inkwell.domain.service import AuthService
from inkwell.domain.value import Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    password: str
    email: str | None = None


class RegisterResponse(BaseResponse):
    """Register response."""

    user: UserSummary


class RegisterUseCase:
    """Use case for creating an account with a username and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Args:
            request: Register request

        Returns:
            The new user's public identity

        Raises:
            UserAlreadyExistsError: If the username is taken
            ValueError: If the username is malformed
        """
        with logfire.span("register.execute", username=request.username):
            user = await self.auth_service.register(
                username=Username(request.username),
                password=request.password,
                email=request.email,
            )

            return RegisterResponse(
                user=UserSummary(
                    id=str(user.id), username=user.username.root, email=user.email
                )
            )
