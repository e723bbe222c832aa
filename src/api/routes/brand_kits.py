from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.params import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.brand_kits import (
    BrandKitResponse,
    ColorData,
    CreateBrandKitUseCase,
    CreateShareLinkUseCase,
    DeleteBrandKitResponse,
    DeleteBrandKitUseCase,
    FontData,
    GetBrandKitUseCase,
    GetSharedBrandKitUseCase,
    RevokeShareLinkResponse,
    RevokeShareLinkUseCase,
    ShareLinkResponse,
    SharedBrandKitResponse,
    UpdateBrandKitUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.libs.result import Error

# One kit per business, managed by its team
router = APIRouter(prefix="/businesses/{business_id}/brand-kit", tags=["Brand Kits"])

# Public, addressed by share token
share_router = APIRouter(prefix="/share", tags=["Brand Kits"])


def _raise_error(error: Error):
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "FORBIDDEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("BUSINESS_NOT_FOUND", "BRAND_KIT_NOT_FOUND", "SHARE_LINK_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "BRAND_KIT_EXISTS":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


class CreateBrandKitRequest(BaseModel):
    """
    Create brand kit HTTP request payload
    """

    business_name: str = Field(..., min_length=1, max_length=255)
    business_description: Optional[str] = None
    industry: Optional[str] = Field(None, max_length=100)
    logo_url: str = Field(..., min_length=1)
    logo_svg: Optional[str] = None
    colors: List[ColorData] = Field(..., min_length=1, max_length=10)
    fonts: FontData
    tagline: Optional[str] = None
    design_justification: Optional[str] = None


class UpdateBrandKitRequest(BaseModel):
    """
    Update brand kit HTTP request payload; omitted fields are left unchanged
    """

    business_name: Optional[str] = Field(None, min_length=1, max_length=255)
    tagline: Optional[str] = None
    is_favorite: Optional[bool] = None


class CreateShareLinkRequest(BaseModel):
    expires_in_days: Optional[int] = Field(None, ge=1, le=365)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BrandKitResponse)
async def create_brand_kit(
    business_id: str,
    request: CreateBrandKitRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Brand Kit

    Requires owner, admin or editor.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, VALIDATION_ERROR
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: BUSINESS_NOT_FOUND
        - 409 Conflict: BRAND_KIT_EXISTS
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = CreateBrandKitUseCase(uow)
    result = await use_case.execute(
        business_uuid,
        UUID(current_user["user_id"]),
        request.business_name,
        request.logo_url,
        request.colors,
        request.fonts,
        business_description=request.business_description,
        industry=request.industry,
        logo_svg=request.logo_svg,
        tagline=request.tagline,
        design_justification=request.design_justification,
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=BrandKitResponse)
async def get_brand_kit(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = GetBrandKitUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.patch("", status_code=status.HTTP_200_OK, response_model=BrandKitResponse)
async def update_brand_kit(
    business_id: str,
    request: UpdateBrandKitRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = UpdateBrandKitUseCase(uow)
    result = await use_case.execute(
        business_uuid,
        UUID(current_user["user_id"]),
        business_name=request.business_name,
        tagline=request.tagline,
        is_favorite=request.is_favorite,
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.delete("", status_code=status.HTTP_200_OK, response_model=DeleteBrandKitResponse)
async def delete_brand_kit(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Brand Kit

    Owner only.
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = DeleteBrandKitUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.post("/share", status_code=status.HTTP_201_CREATED, response_model=ShareLinkResponse)
async def create_share_link(
    business_id: str,
    request: Optional[CreateShareLinkRequest] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Share Link

    Replaces any existing link. Without expires_in_days the link never expires.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, VALIDATION_ERROR
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: BUSINESS_NOT_FOUND, BRAND_KIT_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")
    expires_in_days = request.expires_in_days if request is not None else None

    use_case = CreateShareLinkUseCase(uow)
    result = await use_case.execute(
        business_uuid, UUID(current_user["user_id"]), expires_in_days=expires_in_days
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.delete(
    "/share", status_code=status.HTTP_200_OK, response_model=RevokeShareLinkResponse
)
async def revoke_share_link(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = RevokeShareLinkUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@share_router.get(
    "/{token}", status_code=status.HTTP_200_OK, response_model=SharedBrandKitResponse
)
async def get_shared_brand_kit(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Shared Brand Kit

    Public; no authentication required.

    Raises:
        - 404 Not Found: SHARE_LINK_NOT_FOUND (unknown or expired link)
    """
    use_case = GetSharedBrandKitUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        _raise_error(result.error)

    return result.value
