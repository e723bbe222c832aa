"""
Member Service

Membership rows for a business. Works inside the caller's unit of work and
leaves committing to the caller.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from src.app.repositories.errors import UniqueViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import BusinessMember, MemberRole, User
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class MemberService:
    """
    Business Rules:
    - At most one row per (business_id, user_id)
    - The owner never gets a row and can never be removed
    - A uniqueness violation on insert means the member already exists
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get_business_members(
        self, business_id: UUID
    ) -> List[Tuple[BusinessMember, Optional[User]]]:
        return await self.uow.members.get_by_business_with_users(business_id)

    async def add_member(
        self,
        business_id: UUID,
        user_id: UUID,
        role: MemberRole,
        invited_by: Optional[UUID] = None,
    ) -> Result[BusinessMember]:
        business = await self.uow.businesses.get_by_id(business_id)
        if business is None:
            return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

        if business.owner_user_id == user_id:
            return Return.err(
                Error("ALREADY_MEMBER", "User already owns this business")
            )

        existing = await self.uow.members.get_by_business_and_user(business_id, user_id)
        if existing is not None:
            return Return.err(
                Error("ALREADY_MEMBER", "User is already a member of this business")
            )

        member = BusinessMember(
            business_id=business_id,
            user_id=user_id,
            role=MemberRole(role),
            invited_by=invited_by,
            joined_at=utcnow(),
        )

        try:
            member = await self.uow.members.create(member)
        except UniqueViolationError:
            # Lost the race against a concurrent insert
            logger.info(
                "Concurrent membership insert for business=%s user=%s",
                business_id,
                user_id,
            )
            return Return.err(
                Error(
                    "ALREADY_MEMBER",
                    "User is already a member of this business",
                    reason="unique_violation",
                )
            )

        return Return.ok(member)

    async def update_member_role(
        self, business_id: UUID, user_id: UUID, role: MemberRole
    ) -> Result[BusinessMember]:
        member = await self.uow.members.get_by_business_and_user(business_id, user_id)
        if member is None:
            return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

        member.role = MemberRole(role)
        member = await self.uow.members.update(member)
        return Return.ok(member)

    async def remove_member(self, business_id: UUID, user_id: UUID) -> Result[None]:
        business = await self.uow.businesses.get_by_id(business_id)
        if business is not None and business.owner_user_id == user_id:
            return Return.err(
                Error("CANNOT_REMOVE_OWNER", "The business owner cannot be removed")
            )

        member = await self.uow.members.get_by_business_and_user(business_id, user_id)
        if member is None:
            return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

        await self.uow.members.delete(member)
        return Return.ok()
