"""
Access Request Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.members.dtos import UserSummary, to_user_summary
from src.domain.entities import BusinessAccessRequest, User


class AccessRequestResponse(BaseModel):
    id: str
    business_id: str
    user_id: str
    requested_role: str
    message: Optional[str] = None
    status: str
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[str] = None
    created_at: str
    user: Optional[UserSummary] = None


class AccessRequestListResponse(BaseModel):
    requests: List[AccessRequestResponse]


class WithdrawAccessRequestResponse(BaseModel):
    success: bool


def to_access_request_response(
    request: BusinessAccessRequest, user: Optional[User] = None
) -> AccessRequestResponse:
    return AccessRequestResponse(
        id=str(request.id),
        business_id=str(request.business_id),
        user_id=str(request.user_id),
        requested_role=request.requested_role.value,
        message=request.message,
        status=request.status.value,
        reviewed_by=str(request.reviewed_by) if request.reviewed_by else None,
        reviewed_at=request.reviewed_at.isoformat() if request.reviewed_at else None,
        created_at=request.created_at.isoformat(),
        user=to_user_summary(user),
    )
