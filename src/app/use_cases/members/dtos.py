"""
Member Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import BusinessMember, User


class UserSummary(BaseModel):
    """Identity shown next to members, inviters and requesters"""

    id: str
    email: str
    full_name: Optional[str] = None


class MemberResponse(BaseModel):
    id: str
    business_id: str
    user_id: str
    role: str
    invited_by: Optional[str] = None
    joined_at: str
    user: Optional[UserSummary] = None


class MemberListResponse(BaseModel):
    members: List[MemberResponse]
    owner: Optional[UserSummary] = None


class RemoveMemberResponse(BaseModel):
    success: bool


def to_user_summary(user: Optional[User]) -> Optional[UserSummary]:
    if user is None:
        return None
    return UserSummary(id=str(user.id), email=user.email, full_name=user.full_name)


def to_member_response(
    member: BusinessMember, user: Optional[User] = None
) -> MemberResponse:
    return MemberResponse(
        id=str(member.id),
        business_id=str(member.business_id),
        user_id=str(member.user_id),
        role=member.role.value,
        invited_by=str(member.invited_by) if member.invited_by else None,
        joined_at=member.joined_at.isoformat(),
        user=to_user_summary(user),
    )
