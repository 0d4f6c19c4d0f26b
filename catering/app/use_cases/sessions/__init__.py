from .purge_expired_sessions_use_case import (
    PurgeExpiredSessionsResponse,
    PurgeExpiredSessionsUseCase,
)

__all__ = [
    "PurgeExpiredSessionsUseCase",
    "PurgeExpiredSessionsResponse",
]
