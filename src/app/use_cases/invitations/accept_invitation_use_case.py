"""
Accept Invitation Use Case

Redeems an invitation token for the authenticated user.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.member_service import MemberService
from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus
from src.libs.result import Error, Result, Return

from .dtos import AcceptInvitationResponse
from .emails import EmailMatcher, default_email_matcher

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Business Rules:
    - Unknown token fails with INVITATION_NOT_FOUND
    - Only pending invitations can be accepted
    - Past expiry the invitation is marked expired (permanently) and the call fails
    - The accepting user's email must match the invited email
    - Membership and the accepted status are committed together; an existing
      relationship to the business counts as already applied so a retry succeeds
    """

    def __init__(self, uow: UnitOfWork, email_matcher: Optional[EmailMatcher] = None):
        self.uow = uow
        self.email_matcher = email_matcher or default_email_matcher()

    @store_boundary("accept_invitation")
    async def execute(self, token: str, user_id: UUID) -> Result[AcceptInvitationResponse]:
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

            user = await self.uow.users.get_by_id(user_id)
            if user is None or not self.email_matcher(invitation.email, user.email):
                logger.warning(
                    "Invitation %s presented by user %s with a different email",
                    invitation.id,
                    user_id,
                )
                return Return.err(
                    Error(
                        "EMAIL_MISMATCH",
                        "This invitation was sent to a different email address",
                    )
                )

            existing_role = await PermissionService(self.uow).get_user_role(
                user_id, invitation.business_id
            )
            if existing_role is None:
                added = await MemberService(self.uow).add_member(
                    invitation.business_id,
                    user_id,
                    invitation.role,
                    invited_by=invitation.invited_by,
                )
                if added.is_err():
                    return added
            else:
                logger.info(
                    "User %s already belongs to business %s; marking invitation %s accepted",
                    user_id,
                    invitation.business_id,
                    invitation.id,
                )

            invitation.status = InvitationStatus.accepted
            await self.uow.invitations.update(invitation)
            await self.uow.commit()

            return Return.ok(
                AcceptInvitationResponse(
                    business_id=str(invitation.business_id),
                    role=invitation.role.value,
                    status=InvitationStatus.accepted.value,
                )
            )
