from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.params import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access_requests import (
    AccessRequestListResponse,
    AccessRequestResponse,
    ApproveAccessRequestUseCase,
    CreateAccessRequestUseCase,
    ListAccessRequestsUseCase,
    RejectAccessRequestUseCase,
    WithdrawAccessRequestResponse,
    WithdrawAccessRequestUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.libs.result import Error

router = APIRouter(
    prefix="/businesses/{business_id}/access-requests", tags=["Access Requests"]
)


def _raise_error(error: Error):
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("FORBIDDEN", "NOT_OWN_REQUEST"):
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("ACCESS_REQUEST_NOT_FOUND", "BUSINESS_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in ("ALREADY_MEMBER", "DUPLICATE_PENDING", "ALREADY_REVIEWED"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


class CreateAccessRequestRequest(BaseModel):
    """
    Access request HTTP request payload
    """

    requested_role: Literal["editor", "viewer"] = Field(
        "viewer", description="Role the requester would like"
    )
    message: Optional[str] = Field(None, max_length=500)


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=AccessRequestResponse
)
async def create_access_request(
    business_id: str,
    request: CreateAccessRequestRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request Access

    Any signed-in user who has no role on the business.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, VALIDATION_ERROR
        - 404 Not Found: BUSINESS_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, DUPLICATE_PENDING
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = CreateAccessRequestUseCase(uow)
    result = await use_case.execute(
        business_uuid,
        UUID(current_user["user_id"]),
        request.requested_role,
        message=request.message,
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.get(
    "", status_code=status.HTTP_200_OK, response_model=AccessRequestListResponse
)
async def list_access_requests(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = ListAccessRequestsUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.delete(
    "/{request_id}",
    status_code=status.HTTP_200_OK,
    response_model=WithdrawAccessRequestResponse,
)
async def withdraw_access_request(
    business_id: str,
    request_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Withdraw Access Request

    Raises:
        - 403 Forbidden: NOT_OWN_REQUEST
        - 404 Not Found: ACCESS_REQUEST_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")
    request_uuid = parse_uuid(request_id, "INVALID_REQUEST_ID", "request ID")

    use_case = WithdrawAccessRequestUseCase(uow)
    result = await use_case.execute(
        request_uuid, UUID(current_user["user_id"]), business_id=business_uuid
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.post(
    "/{request_id}/approve",
    status_code=status.HTTP_200_OK,
    response_model=AccessRequestResponse,
)
async def approve_access_request(
    business_id: str,
    request_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve Access Request

    Adds the requester at the requested role. Requires owner or admin.

    Raises:
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: ACCESS_REQUEST_NOT_FOUND
        - 409 Conflict: ALREADY_REVIEWED
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")
    request_uuid = parse_uuid(request_id, "INVALID_REQUEST_ID", "request ID")

    use_case = ApproveAccessRequestUseCase(uow)
    result = await use_case.execute(
        business_uuid, request_uuid, UUID(current_user["user_id"])
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.post(
    "/{request_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=AccessRequestResponse,
)
async def reject_access_request(
    business_id: str,
    request_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")
    request_uuid = parse_uuid(request_id, "INVALID_REQUEST_ID", "request ID")

    use_case = RejectAccessRequestUseCase(uow)
    result = await use_case.execute(
        business_uuid, request_uuid, UUID(current_user["user_id"])
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value
