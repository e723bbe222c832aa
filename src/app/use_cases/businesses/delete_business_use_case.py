"""
Delete Business Use Case

Owner only. Members, invitations, access requests and the brand kit go with
the business through the foreign key cascade.
"""

import logging
from uuid import UUID

from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PermissionAction
from src.libs.result import Error, Result, Return

from .dtos import DeleteBusinessResponse

logger = logging.getLogger(__name__)


class DeleteBusinessUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("delete_business")
    async def execute(
        self, business_id: UUID, user_id: UUID
    ) -> Result[DeleteBusinessResponse]:
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permissions = PermissionService(self.uow)
            if not await permissions.has_permission(
                user_id, business_id, PermissionAction.delete
            ):
                return Return.err(
                    Error("FORBIDDEN", "Only the owner can delete this business")
                )

            await self.uow.businesses.delete(business)
            await self.uow.commit()
            logger.info("Business %s deleted by %s", business_id, user_id)

            return Return.ok(DeleteBusinessResponse(success=True))
