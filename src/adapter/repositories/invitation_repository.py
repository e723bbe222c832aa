from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.invitation_repository import IBusinessInvitationRepository
from src.domain.entities import BusinessInvitation, InvitationStatus, User


class BusinessInvitationRepository(SqlModelRepository, IBusinessInvitationRepository):
    """BusinessInvitation repository implementation using SQLModel"""

    async def get_by_id(self, invitation_id: UUID) -> Optional[BusinessInvitation]:
        stmt = select(BusinessInvitation).where(BusinessInvitation.id == invitation_id)
        return await self._first(
            stmt, "business_invitations.get_by_id", invitation_id=str(invitation_id)
        )

    async def get_by_token(self, token: str) -> Optional[BusinessInvitation]:
        # The token is a credential; keep it out of error context
        stmt = select(BusinessInvitation).where(BusinessInvitation.token == token)
        return await self._first(stmt, "business_invitations.get_by_token")

    async def get_pending_by_business_and_email(
        self, business_id: UUID, email: str
    ) -> Optional[BusinessInvitation]:
        stmt = select(BusinessInvitation).where(
            BusinessInvitation.business_id == business_id,
            BusinessInvitation.email == email,
            BusinessInvitation.status == InvitationStatus.pending,
        )
        return await self._first(
            stmt,
            "business_invitations.get_pending_by_business_and_email",
            business_id=str(business_id),
        )

    async def get_pending_by_business_with_inviters(
        self, business_id: UUID
    ) -> List[Tuple[BusinessInvitation, Optional[User]]]:
        stmt = (
            select(BusinessInvitation, User)
            .outerjoin(User, User.id == BusinessInvitation.invited_by)
            .where(
                BusinessInvitation.business_id == business_id,
                BusinessInvitation.status == InvitationStatus.pending,
            )
            .order_by(BusinessInvitation.created_at.desc())
        )
        rows = await self._all(
            stmt,
            "business_invitations.get_pending_by_business_with_inviters",
            business_id=str(business_id),
        )
        return [(invitation, inviter) for invitation, inviter in rows]

    async def create(self, invitation: BusinessInvitation) -> BusinessInvitation:
        return await self._save(
            invitation,
            "business_invitations.create",
            business_id=str(invitation.business_id),
        )

    async def update(self, invitation: BusinessInvitation) -> BusinessInvitation:
        return await self._save(
            invitation,
            "business_invitations.update",
            touch=True,
            invitation_id=str(invitation.id),
        )

    async def delete(self, invitation: BusinessInvitation) -> None:
        await self._delete(
            invitation, "business_invitations.delete", invitation_id=str(invitation.id)
        )
