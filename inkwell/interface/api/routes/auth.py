"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.auth import (
    GetCurrentUserResponse,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    LogoutRequest,
    LogoutResponse,
    LogoutUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from inkwell.application.usecase.common import UserSummary
from inkwell.config import Settings
from inkwell.domain.error import DomainError
from inkwell.interface.api.auth import (
    SESSION_COOKIE,
    clear_session_cookie,
    session_user,
    set_session_cookie,
)
from inkwell.interface.error import to_http_exception, validation_message

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=72)  # bcrypt input limit
    email: str | None = Field(default=None, max_length=255)


class LoginAPIRequest(BaseModel):
    """API request for password login."""

    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)


@router.post("/register", response_model=RegisterResponse)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Args:
        request: Username, password and optional email
        register_use_case: Register use case from DI

    Returns:
        The new user's public identity

    Raises:
        HTTPException: 500 if the username is taken, 400 if it is malformed
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(
                username=request.username,
                password=request.password,
                email=request.email,
            )
        )
    except DomainError as e:
        logfire.warn("Registration rejected", username=request.username, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with username and password.

    On success the session token is set as an HTTP-only cookie.

    Args:
        request: Username and password
        response: Response to attach the cookie to
        login_use_case: Login use case from DI
        settings: Application settings from DI

    Returns:
        The logged-in user

    Raises:
        HTTPException: 404 for an unknown user, 401 for a wrong password
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(username=request.username, password=request.password)
        )
    except DomainError as e:
        logfire.info("Login failed", username=request.username, error=str(e))
        raise to_http_exception(e)

    set_session_cookie(response, result.token, settings)
    logfire.info(
        "User logged in", user_id=str(result.user.id), username=result.user.username
    )
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE),
) -> LogoutResponse:
    """End the current session and clear the cookie.

    Succeeds even without a session.
    """
    result = await logout_use_case.execute(LogoutRequest(token=session_token))
    clear_session_cookie(response)
    return result


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    user: UserSummary = Depends(session_user),
) -> GetCurrentUserResponse:
    """Return the user behind the session cookie.

    Raises:
        HTTPException: 401 without a valid session
    """
    return GetCurrentUserResponse(user=user)
