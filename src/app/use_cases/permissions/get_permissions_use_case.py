from uuid import UUID

from src.app.services.permission_service import PermissionService, PermissionSet
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return


class GetPermissionsUseCase:
    """Caller's capability flags on a business; all false with no relationship"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("get_permissions")
    async def execute(self, business_id: UUID, user_id: UUID) -> Result[PermissionSet]:
        async with self.uow:
            permissions = PermissionService(self.uow)
            return Return.ok(
                await permissions.get_user_business_permissions(user_id, business_id)
            )
