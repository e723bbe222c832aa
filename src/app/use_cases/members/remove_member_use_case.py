"""
Remove Member Use Case

Removes a member from a business, or lets a member leave on their own.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.member_service import MemberService
from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Business Rules:
    - Self removal ("leave team") needs no team management permission
    - Removing someone else requires owner or admin
    - The owner can never be removed
    """

    def __init__(self, uow: UnitOfWork, permissions: Optional[PermissionService] = None):
        self.uow = uow
        self.permissions = permissions or PermissionService(uow)

    @store_boundary("remove_member")
    async def execute(
        self, business_id: UUID, requester_id: UUID, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        async with self.uow:
            if requester_id != target_user_id:
                if not await self.permissions.can_manage_team(requester_id, business_id):
                    return Return.err(
                        Error(
                            "FORBIDDEN",
                            "You do not have permission to remove team members",
                        )
                    )

            result = await MemberService(self.uow).remove_member(
                business_id, target_user_id
            )
            if result.is_err():
                return result

            await self.uow.commit()
            logger.info(
                "User %s removed from business %s by %s",
                target_user_id,
                business_id,
                requester_id,
            )

            return Return.ok(RemoveMemberResponse(success=True))
