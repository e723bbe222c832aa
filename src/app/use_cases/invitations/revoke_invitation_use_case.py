import logging
from uuid import UUID

from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import RevokeInvitationResponse

logger = logging.getLogger(__name__)


class RevokeInvitationUseCase:
    """Hard-deletes an invitation of the business, whatever its status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("revoke_invitation")
    async def execute(
        self, business_id: UUID, invitation_id: UUID, requester_id: UUID
    ) -> Result[RevokeInvitationResponse]:
        async with self.uow:
            permissions = PermissionService(self.uow)
            if not await permissions.can_manage_team(requester_id, business_id):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to revoke invitations")
                )

            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.business_id != business_id:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            await self.uow.invitations.delete(invitation)
            await self.uow.commit()
            logger.info("Invitation %s revoked by %s", invitation_id, requester_id)

            return Return.ok(RevokeInvitationResponse(success=True))
