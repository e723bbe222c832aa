from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.member_repository import IBusinessMemberRepository
from src.domain.entities import BusinessMember, User


class BusinessMemberRepository(SqlModelRepository, IBusinessMemberRepository):
    """BusinessMember repository implementation using SQLModel"""

    async def get_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessMember]:
        stmt = select(BusinessMember).where(
            BusinessMember.business_id == business_id,
            BusinessMember.user_id == user_id,
        )
        return await self._first(
            stmt,
            "business_members.get_by_business_and_user",
            business_id=str(business_id),
            user_id=str(user_id),
        )

    async def get_by_business_with_users(
        self, business_id: UUID
    ) -> List[Tuple[BusinessMember, Optional[User]]]:
        stmt = (
            select(BusinessMember, User)
            .outerjoin(User, User.id == BusinessMember.user_id)
            .where(BusinessMember.business_id == business_id)
            .order_by(BusinessMember.joined_at.desc())
        )
        rows = await self._all(
            stmt, "business_members.get_by_business_with_users", business_id=str(business_id)
        )
        return [(member, user) for member, user in rows]

    async def create(self, member: BusinessMember) -> BusinessMember:
        return await self._save(
            member,
            "business_members.create",
            business_id=str(member.business_id),
            user_id=str(member.user_id),
        )

    async def update(self, member: BusinessMember) -> BusinessMember:
        return await self._save(
            member,
            "business_members.update",
            touch=True,
            business_id=str(member.business_id),
            user_id=str(member.user_id),
        )

    async def delete(self, member: BusinessMember) -> None:
        await self._delete(
            member,
            "business_members.delete",
            business_id=str(member.business_id),
            user_id=str(member.user_id),
        )
