"""
Use Cases

Organized into domain folders:
- auth/: Authentication and session lifecycle
- sessions/: Session maintenance
"""

from .auth import (
    LoginUseCase,
    LogoutUseCase,
    GetSessionUseCase,
    RenewAccessTokenUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)
from .sessions import PurgeExpiredSessionsUseCase

__all__ = [
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    "GetSessionUseCase",
    "RenewAccessTokenUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Sessions
    "PurgeExpiredSessionsUseCase",
]
