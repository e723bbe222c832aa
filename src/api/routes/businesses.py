from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.params import parse_uuid
from src.app.services.permission_service import PermissionSet
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.businesses import (
    BusinessListResponse,
    BusinessResponse,
    CheckSlugUseCase,
    CreateBusinessUseCase,
    DeleteBusinessResponse,
    DeleteBusinessUseCase,
    GetBusinessUseCase,
    ListBusinessesUseCase,
    SlugAvailabilityResponse,
    UpdateBusinessUseCase,
)
from src.app.use_cases.permissions import GetPermissionsUseCase
from src.depends import get_current_user, get_unit_of_work
from src.libs.result import Error

router = APIRouter(prefix="/businesses", tags=["Businesses"])


def _raise_error(error: Error):
    if error.code in ("INVALID_SLUG", "VALIDATION_ERROR"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "FORBIDDEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code == "BUSINESS_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "SLUG_TAKEN":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


class CreateBusinessRequest(BaseModel):
    """
    Create business HTTP request payload
    """

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    industry: Optional[str] = Field(None, max_length=100)


class UpdateBusinessRequest(BaseModel):
    """
    Update business HTTP request payload; omitted fields are left unchanged
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    industry: Optional[str] = Field(None, max_length=100)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BusinessResponse)
async def create_business(
    request: CreateBusinessRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Business

    The caller becomes the owner.

    Raises:
        - 400 Bad Request: INVALID_SLUG, VALIDATION_ERROR
        - 401 Unauthorized: UNAUTHENTICATED
        - 409 Conflict: SLUG_TAKEN
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = CreateBusinessUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]),
        request.name,
        request.slug,
        description=request.description,
        industry=request.industry,
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=BusinessListResponse)
async def list_businesses(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    sort: Literal["name", "created_at", "updated_at"] = Query("created_at"),
    order: Literal["asc", "desc"] = Query("desc"),
    industry: Optional[str] = Query(None, max_length=100),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Businesses

    Businesses the caller owns or is a member of, with the caller's role.
    """
    use_case = ListBusinessesUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]),
        limit=limit,
        offset=offset,
        sort=sort,
        order=order,
        industry=industry,
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.get(
    "/check-slug",
    status_code=status.HTTP_200_OK,
    response_model=SlugAvailabilityResponse,
)
async def check_slug(
    slug: str = Query(..., min_length=1, max_length=255),
    exclude_id: Optional[str] = Query(None),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    exclude_business_id = None
    if exclude_id:
        exclude_business_id = parse_uuid(exclude_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = CheckSlugUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), slug, exclude_business_id=exclude_business_id
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.get(
    "/{business_id}", status_code=status.HTTP_200_OK, response_model=BusinessResponse
)
async def get_business(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Business

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID
        - 403 Forbidden: caller has no role on the business
        - 404 Not Found: BUSINESS_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = GetBusinessUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.patch(
    "/{business_id}", status_code=status.HTTP_200_OK, response_model=BusinessResponse
)
async def update_business(
    business_id: str,
    request: UpdateBusinessRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Business

    Requires owner, admin or editor.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, INVALID_SLUG, VALIDATION_ERROR
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: BUSINESS_NOT_FOUND
        - 409 Conflict: SLUG_TAKEN
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = UpdateBusinessUseCase(uow)
    result = await use_case.execute(
        business_uuid,
        UUID(current_user["user_id"]),
        name=request.name,
        slug=request.slug,
        description=request.description,
        industry=request.industry,
    )

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.delete(
    "/{business_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteBusinessResponse,
)
async def delete_business(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Business

    Owner only. Members, invitations, access requests and the brand kit are
    removed with it.
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = DeleteBusinessUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value


@router.get(
    "/{business_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=PermissionSet,
)
async def get_permissions(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business ID")

    use_case = GetPermissionsUseCase(uow)
    result = await use_case.execute(business_uuid, UUID(current_user["user_id"]))

    if result.is_err():
        _raise_error(result.error)

    return result.value
