"""
User Entity

Local mirror of an identity managed by the hosted auth provider.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - identity mirror used for joins (member lists, inviter details).

    Business Rules:
    - id is the subject of the provider-issued access token
    - Upserted from token claims on every authenticated request
    - Email is not unique: the provider may reassign an address to a new id
      while the old mirror row lingers; lookups prefer the latest sync
    """

    __tablename__ = "users"

    id: UUID = Field(primary_key=True)
    email: str = Field(index=True, max_length=255)
    full_name: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
