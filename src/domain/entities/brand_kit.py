"""
BrandKit Entity

The generated brand identity of a business, shareable through a public link.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class BrandKit(SQLModel, table=True):
    """
    BrandKit entity - logo, palette, typography and tagline of one business.

    Business Rules:
    - At most one brand kit per business (business_id is unique)
    - Removed with its business through the foreign key cascade
    - colors holds 1..10 {name, hex, usage} entries; fonts holds {primary, secondary}
    - share_token is null until a share link is created; a new link replaces the old
    - A share link past share_expires_at resolves to nothing
    """

    __tablename__ = "brand_kits"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(
        foreign_key="businesses.id",
        nullable=False,
        unique=True,
        index=True,
        ondelete="CASCADE",
    )
    created_by: UUID = Field(foreign_key="users.id", nullable=False, ondelete="CASCADE")

    business_name: str = Field(max_length=255)
    business_description: Optional[str] = Field(default=None)
    industry: Optional[str] = Field(default=None, max_length=100)

    logo_url: str
    logo_svg: Optional[str] = Field(default=None)
    colors: List[Dict[str, Any]] = Field(sa_column=Column(JSON, nullable=False))
    fonts: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    tagline: Optional[str] = Field(default=None)
    design_justification: Optional[str] = Field(default=None)

    is_favorite: bool = Field(default=False)
    view_count: int = Field(default=0)

    # Public sharing
    share_token: Optional[str] = Field(default=None, unique=True, index=True, max_length=64)
    share_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    # Timestamps
    last_viewed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def is_share_expired(self, now: datetime) -> bool:
        return self.share_expires_at is not None and now > self.share_expires_at
