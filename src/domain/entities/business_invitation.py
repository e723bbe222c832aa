"""
BusinessInvitation Entity

Token-addressed, time-boxed proposal for an email to join a business.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InvitationStatus, MemberRole


class BusinessInvitation(SQLModel, table=True):
    """
    BusinessInvitation entity - pending invitations to join a business.

    Business Rules:
    - Created by owner/admin
    - Expires after 7 days (lazily marked expired on first access)
    - Token is 32 random bytes, hex encoded, unique
    - One pending invitation per (business_id, email)
    - pending -> accepted | declined | expired; terminal states never change
    """

    __tablename__ = "business_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(
        foreign_key="businesses.id", nullable=False, index=True, ondelete="CASCADE"
    )
    email: str = Field(max_length=255, nullable=False, index=True)

    role: MemberRole = Field(nullable=False)
    invited_by: UUID = Field(foreign_key="users.id", nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)

    status: InvitationStatus = Field(default=InvitationStatus.pending)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_business_invitation_expires_at", "expires_at"),
        Index("idx_business_invitation_business_email", "business_id", "email"),
        Index("idx_business_invitation_status", "status"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
