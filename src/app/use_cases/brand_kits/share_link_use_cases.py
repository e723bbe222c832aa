"""
Share Link Use Cases

A brand kit is shared publicly through a token-addressed link. Creating a
link replaces any previous one; revoking clears it. Links optionally expire.
"""

import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from src.app.services.store_boundary import store_boundary
from src.app.services.tokens import RandomBytes, generate_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PermissionAction
from src.libs.result import Error, Result, Return

from .access import load_brand_kit
from .dtos import (
    RevokeShareLinkResponse,
    ShareLinkResponse,
    SharedBrandKitResponse,
    to_shared_brand_kit_response,
)

logger = logging.getLogger(__name__)

MAX_SHARE_DAYS = 365


class CreateShareLinkUseCase:
    """
    Business Rules:
    - Requires edit (owner, admin or editor)
    - expires_in_days is 1..365, or None for a link that never expires
    """

    def __init__(
        self,
        uow: UnitOfWork,
        random_bytes: Optional[RandomBytes] = None,
        base_url: Optional[str] = None,
    ):
        self.uow = uow
        self.random_bytes = random_bytes
        self.base_url = (base_url or ApplicationConfig.APP_URL).rstrip("/")

    @store_boundary("create_share_link")
    async def execute(
        self,
        business_id: UUID,
        user_id: UUID,
        expires_in_days: Optional[int] = None,
    ) -> Result[ShareLinkResponse]:
        if expires_in_days is not None and not 1 <= expires_in_days <= MAX_SHARE_DAYS:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Share links expire within 1 to {MAX_SHARE_DAYS} days",
                )
            )

        async with self.uow:
            loaded = await load_brand_kit(
                self.uow,
                business_id,
                user_id,
                PermissionAction.edit,
                "You do not have permission to share this brand kit",
            )
            if loaded.is_err():
                return loaded
            brand_kit = loaded.value

            brand_kit.share_token = generate_token(self.random_bytes)
            brand_kit.share_expires_at = (
                utcnow() + timedelta(days=expires_in_days)
                if expires_in_days is not None
                else None
            )
            brand_kit = await self.uow.brand_kits.update(brand_kit)
            await self.uow.commit()

            logger.info("Share link created for brand kit %s by %s", brand_kit.id, user_id)

            return Return.ok(
                ShareLinkResponse(
                    token=brand_kit.share_token,
                    share_url=f"{self.base_url}/share/{brand_kit.share_token}",
                    expires_at=(
                        brand_kit.share_expires_at.isoformat()
                        if brand_kit.share_expires_at is not None
                        else None
                    ),
                )
            )


class RevokeShareLinkUseCase:
    """Clears the share link; revoking a kit with no link also succeeds"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("revoke_share_link")
    async def execute(
        self, business_id: UUID, user_id: UUID
    ) -> Result[RevokeShareLinkResponse]:
        async with self.uow:
            loaded = await load_brand_kit(
                self.uow,
                business_id,
                user_id,
                PermissionAction.edit,
                "You do not have permission to share this brand kit",
            )
            if loaded.is_err():
                return loaded
            brand_kit = loaded.value

            if brand_kit.share_token is not None:
                brand_kit.share_token = None
                brand_kit.share_expires_at = None
                await self.uow.brand_kits.update(brand_kit)
                await self.uow.commit()
                logger.info("Share link revoked for brand kit %s", brand_kit.id)

            return Return.ok(RevokeShareLinkResponse(success=True))


class GetSharedBrandKitUseCase:
    """
    Public lookup by share token. Unknown and expired links both answer
    SHARE_LINK_NOT_FOUND. Each successful view is counted.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("get_shared_brand_kit")
    async def execute(self, token: str) -> Result[SharedBrandKitResponse]:
        async with self.uow:
            brand_kit = await self.uow.brand_kits.get_by_share_token(token)
            now = utcnow()
            if brand_kit is None or brand_kit.is_share_expired(now):
                return Return.err(
                    Error("SHARE_LINK_NOT_FOUND", "Share link not found or expired")
                )

            brand_kit.view_count += 1
            brand_kit.last_viewed_at = now
            brand_kit = await self.uow.brand_kits.update(brand_kit)
            await self.uow.commit()

            return Return.ok(to_shared_brand_kit_response(brand_kit))
