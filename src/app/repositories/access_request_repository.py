from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import BusinessAccessRequest, User


class IBusinessAccessRequestRepository(ABC):
    """BusinessAccessRequest repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[BusinessAccessRequest]:
        """Get access request by ID"""
        pass

    @abstractmethod
    async def get_pending_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessAccessRequest]:
        """Get pending access request by business and requester"""
        pass

    @abstractmethod
    async def get_pending_by_business_with_users(
        self, business_id: UUID
    ) -> List[Tuple[BusinessAccessRequest, Optional[User]]]:
        """Get pending access requests of a business with requester identity, newest first"""
        pass

    @abstractmethod
    async def create(self, request: BusinessAccessRequest) -> BusinessAccessRequest:
        """Create a new access request"""
        pass

    @abstractmethod
    async def update(self, request: BusinessAccessRequest) -> BusinessAccessRequest:
        """Update existing access request"""
        pass

    @abstractmethod
    async def delete(self, request: BusinessAccessRequest) -> None:
        """Delete access request"""
        pass
