"""
Update Brand Kit Use Case

Partial update of the editable kit fields; generated assets stay as stored.
"""

from typing import Optional
from uuid import UUID

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PermissionAction
from src.libs.result import Result, Return

from .access import load_brand_kit
from .dtos import BrandKitResponse, to_brand_kit_response


class UpdateBrandKitUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("update_brand_kit")
    async def execute(
        self,
        business_id: UUID,
        user_id: UUID,
        business_name: Optional[str] = None,
        tagline: Optional[str] = None,
        is_favorite: Optional[bool] = None,
    ) -> Result[BrandKitResponse]:
        async with self.uow:
            loaded = await load_brand_kit(
                self.uow,
                business_id,
                user_id,
                PermissionAction.edit,
                "You do not have permission to edit this brand kit",
            )
            if loaded.is_err():
                return loaded
            brand_kit = loaded.value

            if business_name is not None:
                brand_kit.business_name = business_name
            if tagline is not None:
                brand_kit.tagline = tagline
            if is_favorite is not None:
                brand_kit.is_favorite = is_favorite

            brand_kit = await self.uow.brand_kits.update(brand_kit)
            await self.uow.commit()

            return Return.ok(to_brand_kit_response(brand_kit))
