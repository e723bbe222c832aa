"""
Update Business Use Case

Partial update; only the fields passed are changed.
"""

from typing import Optional
from uuid import UUID

from src.app.repositories.errors import UniqueViolationError
from src.app.services.permission_service import PermissionService, role_allows
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PermissionAction
from src.libs.result import Error, Result, Return

from .dtos import BusinessResponse, to_business_response
from .validation import validate_slug


class UpdateBusinessUseCase:
    """
    Business Rules:
    - Requires edit (owner, admin or editor)
    - A new slug must stay unique among the owner's businesses
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("update_business")
    async def execute(
        self,
        business_id: UUID,
        user_id: UUID,
        name: Optional[str] = None,
        slug: Optional[str] = None,
        description: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> Result[BusinessResponse]:
        if slug is not None:
            slug_error = validate_slug(slug)
            if slug_error is not None:
                return Return.err(slug_error)

        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            role = await PermissionService(self.uow).get_user_role(user_id, business_id)
            if not role_allows(role, PermissionAction.edit):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to edit this business")
                )

            if slug is not None and slug != business.slug:
                clash = await self.uow.businesses.get_by_owner_and_slug(
                    business.owner_user_id, slug, exclude_id=business.id
                )
                if clash is not None:
                    return Return.err(
                        Error("SLUG_TAKEN", "You already have a business with this slug")
                    )
                business.slug = slug

            if name is not None:
                business.name = name
            if description is not None:
                business.description = description
            if industry is not None:
                business.industry = industry

            try:
                business = await self.uow.businesses.update(business)
            except UniqueViolationError:
                return Return.err(
                    Error("SLUG_TAKEN", "You already have a business with this slug")
                )

            await self.uow.commit()

            return Return.ok(to_business_response(business, role.value))
