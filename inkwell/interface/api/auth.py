"""Session cookie helpers shared by the routes."""

from dishka import AsyncContainer
from fastapi import Cookie, HTTPException, Request, Response, status

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from inkwell.application.usecase.common import UserSummary
from inkwell.config import Settings

SESSION_COOKIE = "inkwell_session"


async def require_session_user(
    get_current_user_use_case: GetCurrentUserUseCase, token: str | None
) -> UserSummary:
    """Resolve the session cookie or reject the request.

    Args:
        get_current_user_use_case: Get current user use case
        token: Session token from cookie

    Returns:
        The session user

    Raises:
        HTTPException: 401 if the cookie is missing, unknown or expired
    """
    result = await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))
    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return result.user


async def session_user(
    request: Request,
    session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE),
) -> UserSummary:
    """Route dependency resolving the session user.

    Runs before the request body is validated, so anonymous callers get
    401 whatever they send.

    Args:
        request: Incoming request carrying the dishka request container
        session_token: Session token from cookie

    Returns:
        The session user

    Raises:
        HTTPException: 401 if the cookie is missing, unknown or expired
    """
    container: AsyncContainer = request.state.dishka_container
    get_current_user_use_case = await container.get(GetCurrentUserUseCase)
    return await require_session_user(get_current_user_use_case, session_token)


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie."""
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=bool(settings.auth.cookie_secure),
        samesite="lax",
        path="/",
        max_age=settings.auth.session_ttl_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session cookie from the client."""
    response.delete_cookie(key=SESSION_COOKIE, path="/")
