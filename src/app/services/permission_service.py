"""
Permission Service

Resolves a user's effective role on a business and answers capability
questions about it. Ownership is checked first and always wins; the owner
never has a membership row.

Methods read through the caller's unit of work and never commit, so they
must be called inside an active ``async with uow`` block.
"""

from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BusinessRole, PermissionAction

ROLE_CAPABILITIES = {
    BusinessRole.owner: frozenset(
        {
            PermissionAction.view,
            PermissionAction.edit,
            PermissionAction.manage_team,
            PermissionAction.delete,
        }
    ),
    BusinessRole.admin: frozenset(
        {PermissionAction.view, PermissionAction.edit, PermissionAction.manage_team}
    ),
    BusinessRole.editor: frozenset({PermissionAction.view, PermissionAction.edit}),
    BusinessRole.viewer: frozenset({PermissionAction.view}),
}


def role_allows(
    role: Optional[Union[BusinessRole, str]], action: Union[PermissionAction, str]
) -> bool:
    """No role means no capability at all."""
    if role is None:
        return False
    return PermissionAction(action) in ROLE_CAPABILITIES[BusinessRole(role)]


class PermissionSet(BaseModel):
    """All capabilities of one user on one business"""

    business_id: str
    user_id: str
    # Display label only; gating uses the booleans
    role: str
    can_view: bool
    can_edit: bool
    can_manage_team: bool
    can_delete: bool


class PermissionService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get_user_role(
        self, user_id: UUID, business_id: UUID
    ) -> Optional[BusinessRole]:
        business = await self.uow.businesses.get_by_id(business_id)
        if business is None:
            return None

        if business.owner_user_id == user_id:
            return BusinessRole.owner

        member = await self.uow.members.get_by_business_and_user(business_id, user_id)
        if member is None:
            return None

        return BusinessRole(member.role.value)

    async def is_owner(self, user_id: UUID, business_id: UUID) -> bool:
        business = await self.uow.businesses.get_by_id(business_id)
        return business is not None and business.owner_user_id == user_id

    async def can_manage_team(self, user_id: UUID, business_id: UUID) -> bool:
        return await self.has_permission(
            user_id, business_id, PermissionAction.manage_team
        )

    async def has_permission(
        self, user_id: UUID, business_id: UUID, action: PermissionAction
    ) -> bool:
        role = await self.get_user_role(user_id, business_id)
        return role_allows(role, action)

    async def get_user_business_permissions(
        self, user_id: UUID, business_id: UUID
    ) -> PermissionSet:
        role = await self.get_user_role(user_id, business_id)

        return PermissionSet(
            business_id=str(business_id),
            user_id=str(user_id),
            role=role.value if role else BusinessRole.viewer.value,
            can_view=role_allows(role, PermissionAction.view),
            can_edit=role_allows(role, PermissionAction.edit),
            can_manage_team=role_allows(role, PermissionAction.manage_team),
            can_delete=role_allows(role, PermissionAction.delete),
        )
