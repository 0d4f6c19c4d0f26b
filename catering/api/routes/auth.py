from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from catering.api.error import raise_for_error
from catering.app.services.mailer import IMailer
from catering.app.services.password_hasher import IPasswordHasher
from catering.app.services.session_store import ISessionStore
from catering.app.services.token_codec import ITokenCodec
from catering.app.services.unit_of_work import UnitOfWork
from catering.app.use_cases.auth import (
    ForgotPasswordUseCase,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RenewAccessTokenResponse,
    RenewAccessTokenUseCase,
    SessionResponse,
)
from catering.depends import (
    get_bearer_token,
    get_current_session,
    get_mailer,
    get_password_hasher,
    get_session_id,
    get_session_store,
    get_token_codec,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Fields are optional here; the use case reports missing and malformed
    values with its own error codes.
    """

    email: Optional[str] = Field(None, description="Owner email address")
    password: Optional[str] = Field(None, description="Owner password")


class LoginHttpResponse(BaseModel):
    """Login response body; the sid is also set as the session cookie"""

    sid: str
    access_token: str
    refresh_token: str


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginHttpResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_store: ISessionStore = Depends(get_session_store),
    token_codec: ITokenCodec = Depends(get_token_codec),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Owner Login

    Opens a session and returns an access/refresh token pair. If the owner is
    already logged in elsewhere, the existing sid is set and both tokens are
    empty.

    Raises:
        - 400 Bad Request: Missing email or password
        - 401 Unauthorized: Wrong password
        - 404 Not Found: No owner with this email
        - 422 Unprocessable Entity: Malformed email or password
        - 500 Internal Server Error: Store failure
    """
    use_case = LoginUseCase(uow, session_store, token_codec, password_hasher)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    login_response = result.value
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=login_response.sid,
        httponly=True,
        max_age=ApplicationConfig.ACCESS_TOKEN_TTL_SECONDS,
    )
    return LoginHttpResponse(
        sid=login_response.sid,
        access_token=login_response.access_token,
        refresh_token=login_response.refresh_token,
    )


class LogoutRequest(BaseModel):
    """Logout HTTP request payload"""

    password: Optional[str] = Field(None, description="Owner password")


@router.delete("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    request: LogoutRequest,
    response: Response,
    sid: str = Depends(get_session_id),
    bearer_token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_store: ISessionStore = Depends(get_session_store),
    token_codec: ITokenCodec = Depends(get_token_codec),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Owner Logout

    Requires: Authorization bearer token and the session cookie.

    Raises:
        - 400 Bad Request: Missing token, sid or password
        - 401 Unauthorized: Invalid token, invalid session or wrong password
        - 404 Not Found: No session for the sid
        - 500 Internal Server Error: Store failure
    """
    use_case = LogoutUseCase(uow, session_store, token_codec, password_hasher)
    result = await use_case.execute(sid, bearer_token, request.password)

    if result.is_err():
        raise_for_error(result.error)

    response.delete_cookie(ApplicationConfig.SESSION_COOKIE_NAME)
    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: Optional[str] = Field(None, description="Owner email address")


class ForgotPasswordHttpResponse(BaseModel):
    status: str


@router.put(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordHttpResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_store: ISessionStore = Depends(get_session_store),
    token_codec: ITokenCodec = Depends(get_token_codec),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Forgot Password

    Emails a reset link and sets the reset token as an HttpOnly cookie.

    Raises:
        - 400 Bad Request: Missing email
        - 404 Not Found: Email not registered
        - 422 Unprocessable Entity: Malformed email
        - 500 Internal Server Error: Mail or store failure
    """
    use_case = ForgotPasswordUseCase(
        uow, session_store, token_codec, mailer, ApplicationConfig.RESET_PASSWORD_URL
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    response.set_cookie(
        key=ApplicationConfig.RESET_PASSWORD_COOKIE_NAME,
        value=result.value.reset_token,
        httponly=True,
        max_age=ApplicationConfig.ACCESS_TOKEN_TTL_SECONDS,
    )
    return ForgotPasswordHttpResponse(status="sent")


@router.get(
    "/renew-access-token",
    status_code=status.HTTP_200_OK,
    response_model=RenewAccessTokenResponse,
)
async def renew_access_token(
    session: SessionResponse = Depends(get_current_session),
    bearer_token: str = Depends(get_bearer_token),
    session_store: ISessionStore = Depends(get_session_store),
    token_codec: ITokenCodec = Depends(get_token_codec),
):
    """
    Renew Access Token

    Requires: the refresh token as bearer and the session cookie.
    The refresh token is not rotated.

    Raises:
        - 400 Bad Request: Missing token or sid, or no session
        - 401 Unauthorized: Token is not this session's refresh token
        - 500 Internal Server Error: Store failure
    """
    use_case = RenewAccessTokenUseCase(session_store, token_codec)
    result = await use_case.execute(session, bearer_token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
