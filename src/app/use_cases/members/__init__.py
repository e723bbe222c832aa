"""
Member Management Use Cases
"""

from .dtos import (
    MemberListResponse,
    MemberResponse,
    RemoveMemberResponse,
    UserSummary,
)
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_member_role_use_case import UpdateMemberRoleUseCase

__all__ = [
    "ListMembersUseCase",
    "UpdateMemberRoleUseCase",
    "RemoveMemberUseCase",
    "MemberListResponse",
    "MemberResponse",
    "RemoveMemberResponse",
    "UserSummary",
]
