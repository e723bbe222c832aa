from uuid import UUID

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PermissionAction
from src.libs.result import Result, Return

from .access import load_brand_kit
from .dtos import BrandKitResponse, to_brand_kit_response


class GetBrandKitUseCase:
    """Any role on the business may view its kit"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("get_brand_kit")
    async def execute(self, business_id: UUID, user_id: UUID) -> Result[BrandKitResponse]:
        async with self.uow:
            loaded = await load_brand_kit(
                self.uow,
                business_id,
                user_id,
                PermissionAction.view,
                "You do not have access to this business",
            )
            if loaded.is_err():
                return loaded

            return Return.ok(to_brand_kit_response(loaded.value))
