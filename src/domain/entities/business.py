"""
Business Entity

A brand workspace owned by exactly one user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Business(SQLModel, table=True):
    """
    Business entity - owned workspace holding a brand kit and a team.

    Business Rules:
    - owner_user_id is immutable (ownership transfer is not supported)
    - The owner is never stored as a member row
    - (owner_user_id, slug) must be unique
    - Deletion cascades to members, invitations, access requests and the brand kit
    """

    __tablename__ = "businesses"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_user_id: UUID = Field(
        foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE"
    )

    name: str = Field(max_length=255)
    slug: str = Field(max_length=255)
    industry: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_business_owner_slug", "owner_user_id", "slug", unique=True),
    )
