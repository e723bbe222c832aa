from uuid import UUID

from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import BusinessResponse, to_business_response


class GetBusinessUseCase:
    """Any role on the business may view it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("get_business")
    async def execute(self, business_id: UUID, user_id: UUID) -> Result[BusinessResponse]:
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            role = await PermissionService(self.uow).get_user_role(user_id, business_id)
            if role is None:
                return Return.err(
                    Error("FORBIDDEN", "You do not have access to this business")
                )

            return Return.ok(to_business_response(business, role.value))
