"""
Invitation Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.members.dtos import UserSummary, to_user_summary
from src.domain.entities import Business, BusinessInvitation, User


class BusinessSummary(BaseModel):
    id: str
    name: str
    slug: str


class InvitationResponse(BaseModel):
    """Invitation as seen by the business's owner and admins"""

    id: str
    business_id: str
    email: str
    role: str
    invited_by: str
    token: str
    status: str
    expires_at: str
    created_at: str
    inviter: Optional[UserSummary] = None


class InvitationListResponse(BaseModel):
    invitations: List[InvitationResponse]


class InvitationDetailsResponse(BaseModel):
    """Public view of an invitation, addressed by its token"""

    id: str
    email: str
    role: str
    status: str
    expires_at: str
    created_at: str
    inviter: Optional[UserSummary] = None
    business: Optional[BusinessSummary] = None


class AcceptInvitationResponse(BaseModel):
    business_id: str
    role: str
    status: str


class DeclineInvitationResponse(BaseModel):
    status: str


class RevokeInvitationResponse(BaseModel):
    success: bool


def to_invitation_response(
    invitation: BusinessInvitation, inviter: Optional[User] = None
) -> InvitationResponse:
    return InvitationResponse(
        id=str(invitation.id),
        business_id=str(invitation.business_id),
        email=invitation.email,
        role=invitation.role.value,
        invited_by=str(invitation.invited_by),
        token=invitation.token,
        status=invitation.status.value,
        expires_at=invitation.expires_at.isoformat(),
        created_at=invitation.created_at.isoformat(),
        inviter=to_user_summary(inviter),
    )


def to_invitation_details(
    invitation: BusinessInvitation,
    inviter: Optional[User] = None,
    business: Optional[Business] = None,
) -> InvitationDetailsResponse:
    return InvitationDetailsResponse(
        id=str(invitation.id),
        email=invitation.email,
        role=invitation.role.value,
        status=invitation.status.value,
        expires_at=invitation.expires_at.isoformat(),
        created_at=invitation.created_at.isoformat(),
        inviter=to_user_summary(inviter),
        business=(
            BusinessSummary(id=str(business.id), name=business.name, slug=business.slug)
            if business
            else None
        ),
    )
