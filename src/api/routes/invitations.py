from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.utils.params import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    DeclineInvitationResponse,
    DeclineInvitationUseCase,
    GetInvitationUseCase,
    InvitationDetailsResponse,
    InvitationListResponse,
    InvitationResponse,
    ListInvitationsUseCase,
    RevokeInvitationResponse,
    RevokeInvitationUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.libs.result import Error

# Managed by the business's owner and admins
business_router = APIRouter(
    prefix="/businesses/{business_id}/invitations", tags=["Invitations"]
)

# Addressed by token, used by the invitee
router = APIRouter(prefix="/invitations", tags=["Invitations"])


def _raise_error(error: Error):
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("FORBIDDEN", "EMAIL_MISMATCH"):
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("INVITATION_NOT_FOUND", "BUSINESS_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in ("ALREADY_MEMBER", "DUPLICATE_INVITATION"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code in ("INVITATION_EXPIRED", "INVITATION_NO_LONGER_VALID"):
        raise ClientError(error, status_code=status.HTTP_410_GONE)
    raise ServerError(error)


class CreateInvitationRequest(BaseModel):
    """
    Invite user HTTP request payload
    """

    email: EmailStr = Field(..., description="Email address to invite")
    role: Literal["admin", "editor", "viewer"] = Field(..., description="Role to grant")


@business_router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=InvitationResponse
)
async def create_invitation(
    business_id: str,
    request: CreateInvitationRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite User to Business

    Requires owner or admin.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, VALIDATION_ERROR
        - 403 Forbidden: FORBIDDEN
        - 409 Conflict: ALREADY_MEMBER, DUPLICATE_INVITATION
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = CreateInvitationUseCase(uow)
    result = await use_case.execute(
        business_uuid, request.email, request.role, UUID(current_user["user_id"])
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@business_router.get(
    "", status_code=status.HTTP_200_OK, response_model=InvitationListResponse
)
async def list_invitations(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = ListInvitationsUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@business_router.delete(
    "/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=RevokeInvitationResponse,
)
async def revoke_invitation(
    business_id: str,
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Invitation

    Deletes the invitation whatever its status. Requires owner or admin.
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")
    invitation_uuid = parse_uuid(invitation_id, "INVALID_INVITATION_ID", "invitation ID")

    use_case = RevokeInvitationUseCase(uow)
    result = await use_case.execute(
        business_uuid, invitation_uuid, UUID(current_user["user_id"])
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.get(
    "/{token}", status_code=status.HTTP_200_OK, response_model=InvitationDetailsResponse
)
async def get_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Invitation

    Public. Shows the invitation with inviter and business details.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 410 Gone: INVITATION_EXPIRED, INVITATION_NO_LONGER_VALID
    """
    use_case = GetInvitationUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.post(
    "/{token}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    token: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    The signed-in user's email must match the invited email.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND
        - 410 Gone: INVITATION_EXPIRED, INVITATION_NO_LONGER_VALID
    """
    use_case = AcceptInvitationUseCase(uow)
    result = await use_case.execute(token, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.post(
    "/{token}/decline",
    status_code=status.HTTP_200_OK,
    response_model=DeclineInvitationResponse,
)
async def decline_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Decline Invitation

    Public; holding the token is enough.
    """
    use_case = DeclineInvitationUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        _raise_error(result.error)

    return result.value
