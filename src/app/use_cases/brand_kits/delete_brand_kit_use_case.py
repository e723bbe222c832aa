import logging
from uuid import UUID

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PermissionAction
from src.libs.result import Result, Return

from .access import load_brand_kit
from .dtos import DeleteBrandKitResponse

logger = logging.getLogger(__name__)


class DeleteBrandKitUseCase:
    """Owner only, like deleting the business itself"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("delete_brand_kit")
    async def execute(
        self, business_id: UUID, user_id: UUID
    ) -> Result[DeleteBrandKitResponse]:
        async with self.uow:
            loaded = await load_brand_kit(
                self.uow,
                business_id,
                user_id,
                PermissionAction.delete,
                "Only the owner can delete this brand kit",
            )
            if loaded.is_err():
                return loaded

            await self.uow.brand_kits.delete(loaded.value)
            await self.uow.commit()
            logger.info("Brand kit of business %s deleted by %s", business_id, user_id)

            return Return.ok(DeleteBrandKitResponse(success=True))
