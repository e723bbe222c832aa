"""
Create Brand Kit Use Case

Stores the generated identity of a business. A business holds at most one kit.
"""

import logging
from typing import List, Optional
from uuid import UUID

from src.app.repositories.errors import UniqueViolationError
from src.app.services.permission_service import PermissionService, role_allows
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BrandKit, PermissionAction
from src.libs.result import Error, Result, Return

from .dtos import BrandKitResponse, ColorData, FontData, to_brand_kit_response

logger = logging.getLogger(__name__)

MAX_COLORS = 10


class CreateBrandKitUseCase:
    """
    Business Rules:
    - Requires edit (owner, admin or editor)
    - 1..10 colors
    - A second kit for the same business fails with BRAND_KIT_EXISTS
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("create_brand_kit")
    async def execute(
        self,
        business_id: UUID,
        user_id: UUID,
        business_name: str,
        logo_url: str,
        colors: List[ColorData],
        fonts: FontData,
        business_description: Optional[str] = None,
        industry: Optional[str] = None,
        logo_svg: Optional[str] = None,
        tagline: Optional[str] = None,
        design_justification: Optional[str] = None,
    ) -> Result[BrandKitResponse]:
        if not 1 <= len(colors) <= MAX_COLORS:
            return Return.err(
                Error("VALIDATION_ERROR", f"A brand kit needs 1 to {MAX_COLORS} colors")
            )

        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            role = await PermissionService(self.uow).get_user_role(user_id, business_id)
            if not role_allows(role, PermissionAction.edit):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to edit this business")
                )

            existing = await self.uow.brand_kits.get_by_business(business_id)
            if existing is not None:
                return Return.err(
                    Error("BRAND_KIT_EXISTS", "This business already has a brand kit")
                )

            brand_kit = BrandKit(
                business_id=business_id,
                created_by=user_id,
                business_name=business_name,
                business_description=business_description,
                industry=industry,
                logo_url=logo_url,
                logo_svg=logo_svg,
                colors=[color.model_dump() for color in colors],
                fonts=fonts.model_dump(),
                tagline=tagline,
                design_justification=design_justification,
            )

            try:
                brand_kit = await self.uow.brand_kits.create(brand_kit)
            except UniqueViolationError:
                return Return.err(
                    Error("BRAND_KIT_EXISTS", "This business already has a brand kit")
                )

            await self.uow.commit()
            logger.info("Brand kit %s created for business %s", brand_kit.id, business_id)

            return Return.ok(to_brand_kit_response(brand_kit))
