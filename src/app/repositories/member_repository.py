from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import BusinessMember, User


class IBusinessMemberRepository(ABC):
    """BusinessMember repository interface - application layer"""

    @abstractmethod
    async def get_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessMember]:
        """Get membership row by business and user"""
        pass

    @abstractmethod
    async def get_by_business_with_users(
        self, business_id: UUID
    ) -> List[Tuple[BusinessMember, Optional[User]]]:
        """Get all members of a business with their identity, newest first"""
        pass

    @abstractmethod
    async def create(self, member: BusinessMember) -> BusinessMember:
        """Create a new membership row"""
        pass

    @abstractmethod
    async def update(self, member: BusinessMember) -> BusinessMember:
        """Update existing membership row"""
        pass

    @abstractmethod
    async def delete(self, member: BusinessMember) -> None:
        """Delete membership row"""
        pass
