from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.access_request_repository import IBusinessAccessRequestRepository
from src.domain.entities import AccessRequestStatus, BusinessAccessRequest, User


class BusinessAccessRequestRepository(SqlModelRepository, IBusinessAccessRequestRepository):
    """BusinessAccessRequest repository implementation using SQLModel"""

    async def get_by_id(self, request_id: UUID) -> Optional[BusinessAccessRequest]:
        stmt = select(BusinessAccessRequest).where(BusinessAccessRequest.id == request_id)
        return await self._first(
            stmt, "business_access_requests.get_by_id", request_id=str(request_id)
        )

    async def get_pending_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessAccessRequest]:
        stmt = select(BusinessAccessRequest).where(
            BusinessAccessRequest.business_id == business_id,
            BusinessAccessRequest.user_id == user_id,
            BusinessAccessRequest.status == AccessRequestStatus.pending,
        )
        return await self._first(
            stmt,
            "business_access_requests.get_pending_by_business_and_user",
            business_id=str(business_id),
            user_id=str(user_id),
        )

    async def get_pending_by_business_with_users(
        self, business_id: UUID
    ) -> List[Tuple[BusinessAccessRequest, Optional[User]]]:
        stmt = (
            select(BusinessAccessRequest, User)
            .outerjoin(User, User.id == BusinessAccessRequest.user_id)
            .where(
                BusinessAccessRequest.business_id == business_id,
                BusinessAccessRequest.status == AccessRequestStatus.pending,
            )
            .order_by(BusinessAccessRequest.created_at.desc())
        )
        rows = await self._all(
            stmt,
            "business_access_requests.get_pending_by_business_with_users",
            business_id=str(business_id),
        )
        return [(request, user) for request, user in rows]

    async def create(self, request: BusinessAccessRequest) -> BusinessAccessRequest:
        return await self._save(
            request,
            "business_access_requests.create",
            business_id=str(request.business_id),
            user_id=str(request.user_id),
        )

    async def update(self, request: BusinessAccessRequest) -> BusinessAccessRequest:
        return await self._save(
            request,
            "business_access_requests.update",
            touch=True,
            request_id=str(request.id),
        )

    async def delete(self, request: BusinessAccessRequest) -> None:
        await self._delete(
            request, "business_access_requests.delete", request_id=str(request.id)
        )
