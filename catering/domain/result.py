"""
Result types shared by the application layer.

Use cases return ``Result`` values built with ``Return.ok`` / ``Return.err``.
Session lookups return a tagged ``SessionLookup`` so callers handle the
"no session" outcome separately from store faults.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """
    Application error.

    ``message`` is the fixed text shown to API callers.
    ``reason`` is the internal cause, kept for server-side logging only.
    """

    code: str
    message: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[Error] = None

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None


class Return:
    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Fault:
    error: Error


SessionLookup = Union[Found, NotFound, Fault]
