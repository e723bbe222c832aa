from typing import Optional
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.brand_kit_repository import IBrandKitRepository
from src.domain.entities import BrandKit


class BrandKitRepository(SqlModelRepository, IBrandKitRepository):
    """Brand kit repository implementation using SQLModel"""

    async def get_by_business(self, business_id: UUID) -> Optional[BrandKit]:
        stmt = select(BrandKit).where(BrandKit.business_id == business_id)
        return await self._first(
            stmt, "brand_kits.get_by_business", business_id=str(business_id)
        )

    async def get_by_share_token(self, token: str) -> Optional[BrandKit]:
        stmt = select(BrandKit).where(BrandKit.share_token == token)
        return await self._first(stmt, "brand_kits.get_by_share_token")

    async def create(self, brand_kit: BrandKit) -> BrandKit:
        return await self._save(
            brand_kit,
            "brand_kits.create",
            brand_kit_id=str(brand_kit.id),
            business_id=str(brand_kit.business_id),
        )

    async def update(self, brand_kit: BrandKit) -> BrandKit:
        return await self._save(
            brand_kit, "brand_kits.update", touch=True, brand_kit_id=str(brand_kit.id)
        )

    async def delete(self, brand_kit: BrandKit) -> None:
        await self._delete(brand_kit, "brand_kits.delete", brand_kit_id=str(brand_kit.id))
