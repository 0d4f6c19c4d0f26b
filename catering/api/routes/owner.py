from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from catering.api.error import raise_for_error
from catering.app.services.password_hasher import IPasswordHasher
from catering.app.services.token_codec import ITokenCodec
from catering.app.services.unit_of_work import UnitOfWork
from catering.app.use_cases.auth import ResetPasswordResponse, ResetPasswordUseCase
from catering.depends import (
    get_bearer_token,
    get_password_hasher,
    get_token_codec,
    get_unit_of_work,
)

router = APIRouter(prefix="/owner", tags=["Owner"])


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    password: Optional[str] = Field(None, description="New password")
    password_confirm: Optional[str] = Field(None, description="New password, repeated")


@router.put(
    "/reset-password/{rpid}",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password_by_email(
    rpid: str,
    request: ResetPasswordRequest,
    bearer_token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: ITokenCodec = Depends(get_token_codec),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Reset Password By Email

    ``rpid`` is the reset-request id from the emailed link; the bearer token
    is the reset token issued by forgot-password.

    Raises:
        - 400 Bad Request: Missing token or password fields
        - 401 Unauthorized: Token is not a matching reset token, or passwords differ
        - 404 Not Found: Owner no longer exists
        - 422 Unprocessable Entity: Malformed password
    """
    use_case = ResetPasswordUseCase(uow, token_codec, password_hasher)
    result = await use_case.execute(
        bearer_token, rpid, request.password, request.password_confirm
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
