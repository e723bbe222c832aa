"""
Business Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Business


class BusinessResponse(BaseModel):
    """Business record, with the caller's role when known"""

    id: str
    owner_user_id: str
    name: str
    slug: str
    industry: Optional[str] = None
    description: Optional[str] = None
    role: Optional[str] = None
    created_at: str
    updated_at: str


class BusinessListResponse(BaseModel):
    businesses: List[BusinessResponse]
    total: int
    limit: int
    offset: int


class SlugAvailabilityResponse(BaseModel):
    slug: str
    available: bool


class DeleteBusinessResponse(BaseModel):
    success: bool


def to_business_response(business: Business, role: Optional[str] = None) -> BusinessResponse:
    return BusinessResponse(
        id=str(business.id),
        owner_user_id=str(business.owner_user_id),
        name=business.name,
        slug=business.slug,
        industry=business.industry,
        description=business.description,
        role=role,
        created_at=business.created_at.isoformat(),
        updated_at=business.updated_at.isoformat(),
    )
