"""
Catering Domain Entities

Durable records consumed by the auth core.
"""

from .owner import Owner
from .session import AuthSession, SessionInfo

__all__ = [
    "Owner",
    "AuthSession",
    "SessionInfo",
]
