from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus
from src.libs.result import Error, Result, Return

from .dtos import DeclineInvitationResponse


class DeclineInvitationUseCase:
    """
    Declines an invitation by token. Open to anyone holding the token.

    Guards match accept: only a pending, unexpired invitation can be declined.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("decline_invitation")
    async def execute(self, token: str) -> Result[DeclineInvitationResponse]:
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

            invitation.status = InvitationStatus.declined
            await self.uow.invitations.update(invitation)
            await self.uow.commit()

            return Return.ok(
                DeclineInvitationResponse(status=InvitationStatus.declined.value)
            )
