"""Get current user use case."""

from typing import Optional

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.application.usecase.common import UserSummary
from inkwell.domain.service import SessionService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # Session token from cookie


class GetCurrentUserResponse(BaseResponse):
    """Get current user response."""

    user: UserSummary


class GetCurrentUserUseCase:
    """Use case for resolving the session cookie to a user."""

    def __init__(self, session_service: SessionService) -> None:
        """Initialize get current user use case.

        Args:
            session_service: Session domain service
        """
        self.session_service = session_service

    async def execute(
        self, request: GetCurrentUserRequest
    ) -> Optional[GetCurrentUserResponse]:
        """Execute get current user flow.

        Args:
            request: Request with the session token

        Returns:
            The session user, or None if the token is missing, unknown or expired
        """
        session = await self.session_service.resolve(request.token)
        if not session:
            return None

        return GetCurrentUserResponse(user=UserSummary.from_session(session))
