"""
BusinessAccessRequest Entity

Self-service request from a non-member to join a business.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import AccessRequestStatus, MemberRole


class BusinessAccessRequest(SQLModel, table=True):
    """
    BusinessAccessRequest entity - pending proposal awaiting owner/admin review.

    Business Rules:
    - One pending request per (business_id, user_id)
    - pending -> approved | rejected; withdrawal deletes the row
    - Approval materializes a membership at the requested role
    """

    __tablename__ = "business_access_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(
        foreign_key="businesses.id", nullable=False, index=True, ondelete="CASCADE"
    )
    user_id: UUID = Field(
        foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE"
    )

    requested_role: MemberRole = Field(nullable=False)
    message: Optional[str] = Field(default=None, max_length=500)

    status: AccessRequestStatus = Field(default=AccessRequestStatus.pending)
    reviewed_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    reviewed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_access_request_business_user", "business_id", "user_id"),
        Index("idx_access_request_status", "status"),
    )
