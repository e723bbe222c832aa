from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import BusinessInvitation, User


class IBusinessInvitationRepository(ABC):
    """BusinessInvitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[BusinessInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[BusinessInvitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_business_and_email(
        self, business_id: UUID, email: str
    ) -> Optional[BusinessInvitation]:
        """Get pending invitation by business and email"""
        pass

    @abstractmethod
    async def get_pending_by_business_with_inviters(
        self, business_id: UUID
    ) -> List[Tuple[BusinessInvitation, Optional[User]]]:
        """Get pending invitations of a business with inviter identity, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: BusinessInvitation) -> BusinessInvitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: BusinessInvitation) -> BusinessInvitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: BusinessInvitation) -> None:
        """Delete invitation"""
        pass
