from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import BrandKit


class IBrandKitRepository(ABC):
    """Brand kit repository interface - application layer"""

    @abstractmethod
    async def get_by_business(self, business_id: UUID) -> Optional[BrandKit]:
        """Get the brand kit of a business"""
        pass

    @abstractmethod
    async def get_by_share_token(self, token: str) -> Optional[BrandKit]:
        """Get brand kit by share token, expired or not"""
        pass

    @abstractmethod
    async def create(self, brand_kit: BrandKit) -> BrandKit:
        """Create a new brand kit"""
        pass

    @abstractmethod
    async def update(self, brand_kit: BrandKit) -> BrandKit:
        """Update existing brand kit"""
        pass

    @abstractmethod
    async def delete(self, brand_kit: BrandKit) -> None:
        """Delete brand kit"""
        pass
