"""
BusinessMember Entity

Links a non-owner User to a Business with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import MemberRole


class BusinessMember(SQLModel, table=True):
    """
    BusinessMember entity - explicit role row for a team member.

    Business Rules:
    - (business_id, user_id) must be unique
    - Never created for the business owner
    - Created on invitation accept or access request approval
    - Hard deleted on removal or when the business is deleted
    """

    __tablename__ = "business_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(
        foreign_key="businesses.id", nullable=False, index=True, ondelete="CASCADE"
    )
    user_id: UUID = Field(
        foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE"
    )

    role: MemberRole = Field(nullable=False)
    invited_by: Optional[UUID] = Field(default=None, foreign_key="users.id")

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_business_member_business_user", "business_id", "user_id", unique=True),
        Index("idx_business_member_role", "role"),
    )
