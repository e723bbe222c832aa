"""
Get Invitation Use Case

Public lookup by token. Expiry is applied lazily here too.
"""

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus
from src.libs.result import Error, Result, Return

from .dtos import InvitationDetailsResponse, to_invitation_details


class GetInvitationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("get_invitation")
    async def execute(self, token: str) -> Result[InvitationDetailsResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVITATION_NO_LONGER_VALID",
                        f"This invitation has already been {invitation.status.value}",
                    )
                )

            if invitation.is_expired(utcnow()):
                invitation.status = InvitationStatus.expired
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                return Return.err(
                    Error("INVITATION_EXPIRED", "This invitation has expired")
                )

            inviter = await self.uow.users.get_by_id(invitation.invited_by)
            business = await self.uow.businesses.get_by_id(invitation.business_id)

            return Return.ok(to_invitation_details(invitation, inviter, business))
