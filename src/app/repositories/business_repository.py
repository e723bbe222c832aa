from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Business, MemberRole


class IBusinessRepository(ABC):
    """Business repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, business_id: UUID) -> Optional[Business]:
        """Get business by ID"""
        pass

    @abstractmethod
    async def get_by_owner_and_slug(
        self, owner_user_id: UUID, slug: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Business]:
        """Get an owner's business by slug, optionally ignoring one business"""
        pass

    @abstractmethod
    async def list_accessible(
        self,
        user_id: UUID,
        limit: int = 50,
        offset: int = 0,
        sort: str = "created_at",
        order: str = "desc",
        industry: Optional[str] = None,
    ) -> Tuple[List[Tuple[Business, Optional[MemberRole]]], int]:
        """
        Get businesses the user owns or is a member of.

        Returns:
            Tuple of (rows, total)
            - rows: (business, member role) pairs; role is None for owned businesses
            - total: count of all matching businesses, ignoring limit/offset
        """
        pass

    @abstractmethod
    async def create(self, business: Business) -> Business:
        """Create a new business"""
        pass

    @abstractmethod
    async def update(self, business: Business) -> Business:
        """Update existing business"""
        pass

    @abstractmethod
    async def delete(self, business: Business) -> None:
        """Delete business (team rows and the brand kit cascade)"""
        pass
