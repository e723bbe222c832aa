"""
Brand Kit Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import BrandKit


class ColorData(BaseModel):
    name: str = Field(..., min_length=1)
    hex: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")
    usage: str = Field(..., min_length=1)


class FontData(BaseModel):
    primary: str = Field(..., min_length=1)
    secondary: str = Field(..., min_length=1)


class BrandKitResponse(BaseModel):
    """Full brand kit, as seen by members of the business"""

    id: str
    business_id: str
    created_by: str
    business_name: str
    business_description: Optional[str] = None
    industry: Optional[str] = None
    logo_url: str
    logo_svg: Optional[str] = None
    colors: List[ColorData]
    fonts: FontData
    tagline: Optional[str] = None
    design_justification: Optional[str] = None
    is_favorite: bool
    view_count: int
    share_token: Optional[str] = None
    share_expires_at: Optional[str] = None
    created_at: str
    updated_at: str


class SharedBrandKitResponse(BaseModel):
    """Public view behind a share link; no owner or business identifiers"""

    id: str
    business_name: str
    business_description: Optional[str] = None
    industry: Optional[str] = None
    logo_url: str
    logo_svg: Optional[str] = None
    colors: List[ColorData]
    fonts: FontData
    tagline: Optional[str] = None
    view_count: int
    created_at: str


class ShareLinkResponse(BaseModel):
    token: str
    share_url: str
    expires_at: Optional[str] = None


class DeleteBrandKitResponse(BaseModel):
    success: bool


class RevokeShareLinkResponse(BaseModel):
    success: bool


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def to_brand_kit_response(brand_kit: BrandKit) -> BrandKitResponse:
    return BrandKitResponse(
        id=str(brand_kit.id),
        business_id=str(brand_kit.business_id),
        created_by=str(brand_kit.created_by),
        business_name=brand_kit.business_name,
        business_description=brand_kit.business_description,
        industry=brand_kit.industry,
        logo_url=brand_kit.logo_url,
        logo_svg=brand_kit.logo_svg,
        colors=[ColorData(**color) for color in brand_kit.colors],
        fonts=FontData(**brand_kit.fonts),
        tagline=brand_kit.tagline,
        design_justification=brand_kit.design_justification,
        is_favorite=brand_kit.is_favorite,
        view_count=brand_kit.view_count,
        share_token=brand_kit.share_token,
        share_expires_at=_isoformat(brand_kit.share_expires_at),
        created_at=brand_kit.created_at.isoformat(),
        updated_at=brand_kit.updated_at.isoformat(),
    )


def to_shared_brand_kit_response(brand_kit: BrandKit) -> SharedBrandKitResponse:
    return SharedBrandKitResponse(
        id=str(brand_kit.id),
        business_name=brand_kit.business_name,
        business_description=brand_kit.business_description,
        industry=brand_kit.industry,
        logo_url=brand_kit.logo_url,
        logo_svg=brand_kit.logo_svg,
        colors=[ColorData(**color) for color in brand_kit.colors],
        fonts=FontData(**brand_kit.fonts),
        tagline=brand_kit.tagline,
        view_count=brand_kit.view_count,
        created_at=brand_kit.created_at.isoformat(),
    )
