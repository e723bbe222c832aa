from typing import Optional
from uuid import UUID

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import SlugAvailabilityResponse
from .validation import validate_slug


class CheckSlugUseCase:
    """Slug availability among the caller's own businesses"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("check_slug")
    async def execute(
        self, user_id: UUID, slug: str, exclude_business_id: Optional[UUID] = None
    ) -> Result[SlugAvailabilityResponse]:
        slug_error = validate_slug(slug)
        if slug_error is not None:
            return Return.err(slug_error)

        async with self.uow:
            existing = await self.uow.businesses.get_by_owner_and_slug(
                user_id, slug, exclude_id=exclude_business_id
            )

        return Return.ok(SlugAvailabilityResponse(slug=slug, available=existing is None))
