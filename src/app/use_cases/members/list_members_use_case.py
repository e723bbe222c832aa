"""
List Members Use Case

Members of a business newest first, plus the owner's identity.
"""

from uuid import UUID

from src.app.services.member_service import MemberService
from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import MemberListResponse, to_member_response, to_user_summary


class ListMembersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("list_members")
    async def execute(
        self, business_id: UUID, requester_id: UUID
    ) -> Result[MemberListResponse]:
        async with self.uow:
            permissions = PermissionService(self.uow)
            if not await permissions.can_manage_team(requester_id, business_id):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view team members")
                )

            rows = await MemberService(self.uow).get_business_members(business_id)

            business = await self.uow.businesses.get_by_id(business_id)
            owner = None
            if business is not None:
                owner = await self.uow.users.get_by_id(business.owner_user_id)

            return Return.ok(
                MemberListResponse(
                    members=[to_member_response(member, user) for member, user in rows],
                    owner=to_user_summary(owner),
                )
            )
