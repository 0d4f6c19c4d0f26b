"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
Commands carry the request-shape rules; responses are the use case outputs.
"""

from pydantic import BaseModel, EmailStr, Field

# Alphanumeric, at least 8 characters
PASSWORD_PATTERN = r"^[A-Za-z0-9]{8,}$"


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(BaseModel):
    """Login intent"""

    email: EmailStr
    password: str = Field(..., pattern=PASSWORD_PATTERN)


class LogoutCommand(BaseModel):
    """Logout intent - password re-confirmation"""

    password: str = Field(..., pattern=PASSWORD_PATTERN)


class ForgotPasswordCommand(BaseModel):
    """Forgot password intent"""

    email: EmailStr


class ResetPasswordCommand(BaseModel):
    """Reset password intent"""

    password: str = Field(..., pattern=PASSWORD_PATTERN)
    password_confirm: str = Field(..., pattern=PASSWORD_PATTERN)


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """
    Response for login use case.

    When the email already has a live session, only ``sid`` is set and both
    tokens are empty.
    """

    sid: str
    access_token: str = ""
    refresh_token: str = ""


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str


class SessionResponse(BaseModel):
    """Read-only session snapshot"""

    sid: str
    owner_id: int
    jti: str
    valid: bool


class RenewAccessTokenResponse(BaseModel):
    """Response for renew access token use case"""

    access_token: str
    expired_at: str


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    reset_token: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
