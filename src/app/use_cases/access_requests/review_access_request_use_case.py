"""
Review Access Request Use Cases

Approve and reject share their guards: the reviewer must manage the team,
the request must belong to the business and still be pending.
"""

import logging
from uuid import UUID

from src.app.services.member_service import MemberService
from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AccessRequestStatus, BusinessAccessRequest
from src.libs.result import Error, Result, Return

from .dtos import AccessRequestResponse, to_access_request_response

logger = logging.getLogger(__name__)


class _ReviewAccessRequest:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _load_pending(
        self, business_id: UUID, request_id: UUID, reviewed_by: UUID
    ) -> Result[BusinessAccessRequest]:
        permissions = PermissionService(self.uow)
        if not await permissions.can_manage_team(reviewed_by, business_id):
            return Return.err(
                Error("FORBIDDEN", "You do not have permission to review access requests")
            )

        request = await self.uow.access_requests.get_by_id(request_id)
        if request is None or request.business_id != business_id:
            return Return.err(
                Error("ACCESS_REQUEST_NOT_FOUND", "Access request not found")
            )

        if request.status != AccessRequestStatus.pending:
            return Return.err(
                Error(
                    "ALREADY_REVIEWED",
                    f"This request has already been {request.status.value}",
                )
            )

        return Return.ok(request)

    async def _finish(
        self,
        request: BusinessAccessRequest,
        status: AccessRequestStatus,
        reviewed_by: UUID,
    ) -> AccessRequestResponse:
        request.status = status
        request.reviewed_by = reviewed_by
        request.reviewed_at = utcnow()
        request = await self.uow.access_requests.update(request)
        await self.uow.commit()

        logger.info(
            "Access request %s %s by %s", request.id, status.value, reviewed_by
        )
        return to_access_request_response(request)


class ApproveAccessRequestUseCase(_ReviewAccessRequest):
    """
    Adds the requester at the requested role and marks the request approved,
    in one commit. A requester who already belongs to the business counts as
    already added.
    """

    @store_boundary("approve_access_request")
    async def execute(
        self, business_id: UUID, request_id: UUID, reviewed_by: UUID
    ) -> Result[AccessRequestResponse]:
        async with self.uow:
            loaded = await self._load_pending(business_id, request_id, reviewed_by)
            if loaded.is_err():
                return loaded
            request = loaded.value

            existing_role = await PermissionService(self.uow).get_user_role(
                request.user_id, business_id
            )
            if existing_role is None:
                added = await MemberService(self.uow).add_member(
                    business_id,
                    request.user_id,
                    request.requested_role,
                    invited_by=reviewed_by,
                )
                if added.is_err():
                    return added

            return Return.ok(
                await self._finish(request, AccessRequestStatus.approved, reviewed_by)
            )


class RejectAccessRequestUseCase(_ReviewAccessRequest):
    @store_boundary("reject_access_request")
    async def execute(
        self, business_id: UUID, request_id: UUID, reviewed_by: UUID
    ) -> Result[AccessRequestResponse]:
        async with self.uow:
            loaded = await self._load_pending(business_id, request_id, reviewed_by)
            if loaded.is_err():
                return loaded

            return Return.ok(
                await self._finish(loaded.value, AccessRequestStatus.rejected, reviewed_by)
            )
