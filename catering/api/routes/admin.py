"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not owner sessions.
"""

from fastapi import APIRouter, Depends, status

from catering.api.error import raise_for_error
from catering.api.utils.admin_auth import verify_admin_api_key
from catering.app.services.unit_of_work import UnitOfWork
from catering.app.use_cases.sessions import (
    PurgeExpiredSessionsResponse,
    PurgeExpiredSessionsUseCase,
)
from catering.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/sessions/purge-expired",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredSessionsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_sessions(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Sessions

    Deletes durable session rows whose refresh token has expired.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Store failure
    """
    use_case = PurgeExpiredSessionsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
