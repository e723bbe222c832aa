from uuid import UUID

from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import AccessRequestListResponse, to_access_request_response


class ListAccessRequestsUseCase:
    """Pending requests only, newest first, with requester identity"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("list_access_requests")
    async def execute(
        self, business_id: UUID, requester_id: UUID
    ) -> Result[AccessRequestListResponse]:
        async with self.uow:
            permissions = PermissionService(self.uow)
            if not await permissions.can_manage_team(requester_id, business_id):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view access requests")
                )

            rows = await self.uow.access_requests.get_pending_by_business_with_users(
                business_id
            )

            return Return.ok(
                AccessRequestListResponse(
                    requests=[
                        to_access_request_response(request, user)
                        for request, user in rows
                    ]
                )
            )
