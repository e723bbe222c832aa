"""
List Businesses Use Case

Businesses the caller owns or belongs to, with the caller's role on each.
"""

from typing import Optional
from uuid import UUID

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BusinessRole
from src.libs.result import Result, Return

from .dtos import BusinessListResponse, to_business_response


class ListBusinessesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("list_businesses")
    async def execute(
        self,
        user_id: UUID,
        limit: int = 50,
        offset: int = 0,
        sort: str = "created_at",
        order: str = "desc",
        industry: Optional[str] = None,
    ) -> Result[BusinessListResponse]:
        async with self.uow:
            rows, total = await self.uow.businesses.list_accessible(
                user_id,
                limit=limit,
                offset=offset,
                sort=sort,
                order=order,
                industry=industry,
            )

            businesses = []
            for business, member_role in rows:
                if business.owner_user_id == user_id:
                    role = BusinessRole.owner.value
                else:
                    role = member_role.value if member_role else None
                businesses.append(to_business_response(business, role))

            return Return.ok(
                BusinessListResponse(
                    businesses=businesses, total=total, limit=limit, offset=offset
                )
            )
