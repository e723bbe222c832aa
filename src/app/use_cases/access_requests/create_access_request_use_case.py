"""
Create Access Request Use Case

Lets a signed-in user ask to join a business at a given role.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccessRequestStatus, BusinessAccessRequest, MemberRole
from src.libs.result import Error, Result, Return

from .dtos import AccessRequestResponse, to_access_request_response

logger = logging.getLogger(__name__)

REQUESTABLE_ROLES = (MemberRole.editor, MemberRole.viewer)
MESSAGE_MAX_LENGTH = 500


class CreateAccessRequestUseCase:
    """
    Business Rules:
    - Only editor or viewer can be requested
    - Members and the owner cannot request access
    - One pending request per (business, user)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("create_access_request")
    async def execute(
        self,
        business_id: UUID,
        user_id: UUID,
        requested_role: str,
        message: Optional[str] = None,
    ) -> Result[AccessRequestResponse]:
        if requested_role not in [role.value for role in REQUESTABLE_ROLES]:
            return Return.err(
                Error("VALIDATION_ERROR", "Requested role must be editor or viewer")
            )
        if message is not None and len(message) > MESSAGE_MAX_LENGTH:
            return Return.err(
                Error("VALIDATION_ERROR", "Message must be 500 characters or less")
            )

        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            role = await PermissionService(self.uow).get_user_role(user_id, business_id)
            if role is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this business")
                )

            pending = await self.uow.access_requests.get_pending_by_business_and_user(
                business_id, user_id
            )
            if pending is not None:
                return Return.err(
                    Error(
                        "DUPLICATE_PENDING",
                        "You already have a pending request for this business",
                    )
                )

            request = BusinessAccessRequest(
                business_id=business_id,
                user_id=user_id,
                requested_role=MemberRole(requested_role),
                message=message,
                status=AccessRequestStatus.pending,
            )
            request = await self.uow.access_requests.create(request)
            await self.uow.commit()

            logger.info(
                "Access request %s created for business %s by %s",
                request.id,
                business_id,
                user_id,
            )

            return Return.ok(to_access_request_response(request))
