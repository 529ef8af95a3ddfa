"""Logout use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseResponse
from inkwell.domain.service import SessionService


class LogoutRequest(BaseModel):
    """Logout request."""

    token: str | None = None  # Session token from cookie


class LogoutResponse(BaseResponse):
    """Logout response."""

    pass


class LogoutUseCase:
    """Use case for ending the current session."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: LogoutRequest) -> LogoutResponse:
        """Delete the session, if any. Logging out twice is not an error."""
        await self.session_service.close_session(request.token)
        return LogoutResponse()
