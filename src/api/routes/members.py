from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.params import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    ListMembersUseCase,
    MemberListResponse,
    MemberResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateMemberRoleUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.libs.result import Error

router = APIRouter(prefix="/businesses/{business_id}/members", tags=["Members"])


def _raise_error(error: Error):
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "FORBIDDEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("MEMBER_NOT_FOUND", "BUSINESS_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "CANNOT_REMOVE_OWNER":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


class UpdateMemberRoleRequest(BaseModel):
    """
    Update member role HTTP request payload
    """

    role: Literal["admin", "editor", "viewer"] = Field(..., description="New role")


@router.get("", status_code=status.HTTP_200_OK, response_model=MemberListResponse)
async def list_members(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Members

    Members newest first plus the owner's identity. Requires owner or admin.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: FORBIDDEN
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = ListMembersUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.patch(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=MemberResponse
)
async def update_member_role(
    business_id: str,
    user_id: str,
    request: UpdateMemberRoleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Member Role

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, INVALID_USER_ID, VALIDATION_ERROR
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")
    target_uuid = parse_uuid(user_id, "INVALID_USER_ID", "user ID")

    use_case = UpdateMemberRoleUseCase(uow)
    result = await use_case.execute(
        business_uuid, UUID(current_user["user_id"]), target_uuid, request.role
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.delete(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=RemoveMemberResponse
)
async def remove_member(
    business_id: str,
    user_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Members may remove themselves; removing anyone else requires owner or admin.

    Raises:
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: MEMBER_NOT_FOUND
        - 409 Conflict: CANNOT_REMOVE_OWNER
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")
    target_uuid = parse_uuid(user_id, "INVALID_USER_ID", "user ID")

    use_case = RemoveMemberUseCase(uow)
    result = await use_case.execute(
        business_uuid, UUID(current_user["user_id"]), target_uuid
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value
