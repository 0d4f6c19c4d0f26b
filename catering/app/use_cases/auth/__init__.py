"""
Authentication Use Cases

Login, session lookup, token renewal, logout and password recovery.
"""

from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .session_use_case import GetSessionUseCase
from .renew_access_token_use_case import RenewAccessTokenUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    LoginCommand,
    LogoutCommand,
    ForgotPasswordCommand,
    ResetPasswordCommand,
    LoginResponse,
    LogoutResponse,
    SessionResponse,
    RenewAccessTokenResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LogoutUseCase",
    "GetSessionUseCase",
    "RenewAccessTokenUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "LoginCommand",
    "LogoutCommand",
    "ForgotPasswordCommand",
    "ResetPasswordCommand",
    # DTOs - Responses
    "LoginResponse",
    "LogoutResponse",
    "SessionResponse",
    "RenewAccessTokenResponse",
    "ForgotPasswordResponse",
    "ResetPasswordResponse",
]
