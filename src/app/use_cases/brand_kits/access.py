from uuid import UUID

from src.app.services.permission_service import PermissionService, role_allows
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BrandKit, PermissionAction
from src.libs.result import Error, Result, Return


async def load_brand_kit(
    uow: UnitOfWork,
    business_id: UUID,
    user_id: UUID,
    action: PermissionAction,
    denied_message: str,
) -> Result[BrandKit]:
    """Business must exist, the caller's role must allow action, and a kit must exist"""
    business = await uow.businesses.get_by_id(business_id)
    if business is None:
        return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

    role = await PermissionService(uow).get_user_role(user_id, business_id)
    if not role_allows(role, action):
        return Return.err(Error("FORBIDDEN", denied_message))

    brand_kit = await uow.brand_kits.get_by_business(business_id)
    if brand_kit is None:
        return Return.err(Error("BRAND_KIT_NOT_FOUND", "Brand kit not found"))

    return Return.ok(brand_kit)
