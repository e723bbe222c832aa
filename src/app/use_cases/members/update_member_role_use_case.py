from uuid import UUID

from src.app.services.member_service import MemberService
from src.app.services.permission_service import PermissionService
from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MemberRole
from src.libs.result import Error, Result, Return

from .dtos import MemberResponse, to_member_response


class UpdateMemberRoleUseCase:
    """
    Overwrites a member's role.

    Business Rules:
    - Caller must be owner or admin
    - Role must be admin, editor or viewer (the owner is not a member row)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("update_member_role")
    async def execute(
        self,
        business_id: UUID,
        requester_id: UUID,
        target_user_id: UUID,
        role: str,
    ) -> Result[MemberResponse]:
        try:
            new_role = MemberRole(role)
        except ValueError:
            return Return.err(
                Error("VALIDATION_ERROR", "Role must be one of: admin, editor, viewer")
            )

        async with self.uow:
            permissions = PermissionService(self.uow)
            if not await permissions.can_manage_team(requester_id, business_id):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to manage team members")
                )

            result = await MemberService(self.uow).update_member_role(
                business_id, target_user_id, new_role
            )
            if result.is_err():
                return result

            await self.uow.commit()

            user = await self.uow.users.get_by_id(target_user_id)
            return Return.ok(to_member_response(result.value, user))
