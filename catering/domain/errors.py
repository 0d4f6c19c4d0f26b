"""
Error catalogue for the auth core.

Every caller-visible error carries one of these fixed messages; the specific
cause goes into ``Error.reason``.
"""

from typing import Optional

from .result import Error

REQUIRED_PARAM = "REQUIRED_PARAM"
INVALID_PARAM = "INVALID_PARAM"
UNAUTHORIZED = "UNAUTHORIZED"
NOT_FOUND = "NOT_FOUND"
STORE_FAULT = "STORE_FAULT"
TOKEN_ENCODING_FAILED = "TOKEN_ENCODING_FAILED"
MAILER_FAULT = "MAILER_FAULT"

_MESSAGES = {
    REQUIRED_PARAM: "missing required param",
    INVALID_PARAM: "invalid request's param",
    UNAUTHORIZED: "not authorized",
    NOT_FOUND: "resource not found",
    STORE_FAULT: "Internal server error",
    TOKEN_ENCODING_FAILED: "Internal server error",
    MAILER_FAULT: "Internal server error",
}


def app_error(code: str, reason: Optional[str] = None) -> Error:
    return Error(code, _MESSAGES[code], reason)


def required_param(reason: Optional[str] = None) -> Error:
    return app_error(REQUIRED_PARAM, reason)


def invalid_param(reason: Optional[str] = None) -> Error:
    return app_error(INVALID_PARAM, reason)


def unauthorized(reason: Optional[str] = None) -> Error:
    return app_error(UNAUTHORIZED, reason)


def not_found(reason: Optional[str] = None) -> Error:
    return app_error(NOT_FOUND, reason)


def store_fault(reason: Optional[str] = None) -> Error:
    return app_error(STORE_FAULT, reason)
