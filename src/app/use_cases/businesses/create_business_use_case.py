"""
Create Business Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.repositories.errors import UniqueViolationError
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Business, BusinessRole
from src.libs.result import Error, Result, Return

from .dtos import BusinessResponse, to_business_response
from .validation import validate_slug

logger = logging.getLogger(__name__)


class CreateBusinessUseCase:
    """
    Business Rules:
    - The creator becomes the owner (no membership row)
    - Slug is unique per owner
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("create_business")
    async def execute(
        self,
        owner_id: UUID,
        name: str,
        slug: str,
        description: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> Result[BusinessResponse]:
        slug_error = validate_slug(slug)
        if slug_error is not None:
            return Return.err(slug_error)

        async with self.uow:
            existing = await self.uow.businesses.get_by_owner_and_slug(owner_id, slug)
            if existing is not None:
                return Return.err(
                    Error("SLUG_TAKEN", "You already have a business with this slug")
                )

            business = Business(
                owner_user_id=owner_id,
                name=name,
                slug=slug,
                description=description,
                industry=industry,
            )

            try:
                business = await self.uow.businesses.create(business)
            except UniqueViolationError:
                return Return.err(
                    Error("SLUG_TAKEN", "You already have a business with this slug")
                )

            await self.uow.commit()
            logger.info("Business %s created by %s", business.id, owner_id)

            return Return.ok(to_business_response(business, BusinessRole.owner.value))
