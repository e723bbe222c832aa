"""
Create Invitation Use Case

Issues a token-addressed, time-boxed invitation for an email address.
"""

import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.tokens import RandomBytes, generate_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import BusinessInvitation, InvitationStatus, MemberRole
from src.libs.result import Error, Result, Return

from .dtos import InvitationResponse, to_invitation_response
from .emails import normalize_email

logger = logging.getLogger(__name__)


class CreateInvitationUseCase:
    """
    Business Rules:
    - Caller must be owner or admin
    - Inviting an existing member (or the owner) fails with ALREADY_MEMBER
    - One pending invitation per (business, email)
    - Token is 32 random bytes, hex encoded; expiry defaults to 7 days
    """

    def __init__(
        self,
        uow: UnitOfWork,
        random_bytes: Optional[RandomBytes] = None,
        ttl_days: Optional[int] = None,
    ):
        self.uow = uow
        self.random_bytes = random_bytes
        self.ttl_days = ttl_days if ttl_days is not None else ApplicationConfig.INVITATION_TTL_DAYS

    def generate_token(self) -> str:
        return generate_token(self.random_bytes)

    @store_boundary("create_invitation")
    async def execute(
        self,
        business_id: UUID,
        email: str,
        role: MemberRole,
        invited_by: UUID,
    ) -> Result[InvitationResponse]:
        email = normalize_email(email)

        async with self.uow:
            permissions = PermissionService(self.uow)
            if not await permissions.can_manage_team(invited_by, business_id):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to invite team members")
                )

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user is not None:
                existing_role = await permissions.get_user_role(
                    existing_user.id, business_id
                )
                if existing_role is not None:
                    return Return.err(
                        Error(
                            "ALREADY_MEMBER",
                            "This user is already a member of this business",
                        )
                    )

            pending = await self.uow.invitations.get_pending_by_business_and_email(
                business_id, email
            )
            if pending is not None:
                return Return.err(
                    Error(
                        "DUPLICATE_INVITATION",
                        "An invitation has already been sent to this email",
                    )
                )

            invitation = BusinessInvitation(
                business_id=business_id,
                email=email,
                role=MemberRole(role),
                invited_by=invited_by,
                token=self.generate_token(),
                status=InvitationStatus.pending,
                expires_at=utcnow() + timedelta(days=self.ttl_days),
            )
            invitation = await self.uow.invitations.create(invitation)
            await self.uow.commit()

            logger.info(
                "Invitation %s created for business %s by %s",
                invitation.id,
                business_id,
                invited_by,
            )

            inviter = await self.uow.users.get_by_id(invited_by)
            return Return.ok(to_invitation_response(invitation, inviter))
