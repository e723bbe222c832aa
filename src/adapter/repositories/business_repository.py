from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import and_, func, or_, select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.business_repository import IBusinessRepository
from src.app.repositories.errors import RepositoryError
from src.domain.entities import Business, BusinessMember, MemberRole

SORT_COLUMNS = {
    "name": Business.name,
    "created_at": Business.created_at,
    "updated_at": Business.updated_at,
}


class BusinessRepository(SqlModelRepository, IBusinessRepository):
    """Business repository implementation using SQLModel"""

    async def get_by_id(self, business_id: UUID) -> Optional[Business]:
        stmt = select(Business).where(Business.id == business_id)
        return await self._first(stmt, "businesses.get_by_id", business_id=str(business_id))

    async def get_by_owner_and_slug(
        self, owner_user_id: UUID, slug: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Business]:
        stmt = select(Business).where(
            Business.owner_user_id == owner_user_id, Business.slug == slug
        )
        if exclude_id is not None:
            stmt = stmt.where(Business.id != exclude_id)
        return await self._first(
            stmt, "businesses.get_by_owner_and_slug", owner_user_id=str(owner_user_id)
        )

    async def list_accessible(
        self,
        user_id: UUID,
        limit: int = 50,
        offset: int = 0,
        sort: str = "created_at",
        order: str = "desc",
        industry: Optional[str] = None,
    ) -> Tuple[List[Tuple[Business, Optional[MemberRole]]], int]:
        membership_join = and_(
            BusinessMember.business_id == Business.id,
            BusinessMember.user_id == user_id,
        )
        conditions = [
            or_(Business.owner_user_id == user_id, BusinessMember.id.is_not(None))
        ]
        if industry:
            conditions.append(Business.industry == industry)

        sort_column = SORT_COLUMNS.get(sort, Business.created_at)
        ordering = sort_column.asc() if order == "asc" else sort_column.desc()

        stmt = (
            select(Business, BusinessMember.role)
            .outerjoin(BusinessMember, membership_join)
            .where(*conditions)
            .order_by(ordering)
            .offset(offset)
            .limit(limit)
        )
        count_stmt = (
            select(func.count(Business.id))
            .select_from(Business)
            .outerjoin(BusinessMember, membership_join)
            .where(*conditions)
        )

        try:
            rows = (await self.session.exec(stmt)).all()
            total = (await self.session.exec(count_stmt)).one()
        except SQLAlchemyError as exc:
            raise RepositoryError(
                "businesses.list_accessible", {"user_id": str(user_id)}
            ) from exc

        return [(business, role) for business, role in rows], total

    async def create(self, business: Business) -> Business:
        return await self._save(
            business,
            "businesses.create",
            business_id=str(business.id),
            owner_user_id=str(business.owner_user_id),
        )

    async def update(self, business: Business) -> Business:
        return await self._save(
            business, "businesses.update", touch=True, business_id=str(business.id)
        )

    async def delete(self, business: Business) -> None:
        await self._delete(business, "businesses.delete", business_id=str(business.id))
