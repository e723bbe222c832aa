from uuid import UUID

from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import InvitationListResponse, to_invitation_response


class ListInvitationsUseCase:
    """Pending invitations of a business, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("list_invitations")
    async def execute(
        self, business_id: UUID, requester_id: UUID
    ) -> Result[InvitationListResponse]:
        async with self.uow:
            permissions = PermissionService(self.uow)
            if not await permissions.can_manage_team(requester_id, business_id):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view invitations")
                )

            rows = await self.uow.invitations.get_pending_by_business_with_inviters(
                business_id
            )

            return Return.ok(
                InvitationListResponse(
                    invitations=[
                        to_invitation_response(invitation, inviter)
                        for invitation, inviter in rows
                    ]
                )
            )
