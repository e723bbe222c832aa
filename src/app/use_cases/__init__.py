"""
Use Cases

Organized into domain folders:
- businesses/: Business CRUD and slug availability
- permissions/: Caller capability flags
- members/: Team member management
- invitations/: Invitation lifecycle
- access_requests/: Access request lifecycle
- brand_kits/: Brand kit storage and share links
- users/: Identity mirror

Import from subdirectories for better organization.
"""

from .access_requests import (
    ApproveAccessRequestUseCase,
    CreateAccessRequestUseCase,
    ListAccessRequestsUseCase,
    RejectAccessRequestUseCase,
    WithdrawAccessRequestUseCase,
)
from .brand_kits import (
    CreateBrandKitUseCase,
    CreateShareLinkUseCase,
    DeleteBrandKitUseCase,
    GetBrandKitUseCase,
    GetSharedBrandKitUseCase,
    RevokeShareLinkUseCase,
    UpdateBrandKitUseCase,
)
from .businesses import (
    CheckSlugUseCase,
    CreateBusinessUseCase,
    DeleteBusinessUseCase,
    GetBusinessUseCase,
    ListBusinessesUseCase,
    UpdateBusinessUseCase,
)
from .invitations import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    DeclineInvitationUseCase,
    GetInvitationUseCase,
    ListInvitationsUseCase,
    RevokeInvitationUseCase,
)
from .members import (
    ListMembersUseCase,
    RemoveMemberUseCase,
    UpdateMemberRoleUseCase,
)
from .permissions import GetPermissionsUseCase
from .users import SyncUserUseCase

__all__ = [
    # Businesses
    "CreateBusinessUseCase",
    "ListBusinessesUseCase",
    "GetBusinessUseCase",
    "UpdateBusinessUseCase",
    "DeleteBusinessUseCase",
    "CheckSlugUseCase",
    # Permissions
    "GetPermissionsUseCase",
    # Members
    "ListMembersUseCase",
    "UpdateMemberRoleUseCase",
    "RemoveMemberUseCase",
    # Invitations
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "RevokeInvitationUseCase",
    # Access requests
    "CreateAccessRequestUseCase",
    "ListAccessRequestsUseCase",
    "ApproveAccessRequestUseCase",
    "RejectAccessRequestUseCase",
    "WithdrawAccessRequestUseCase",
    # Brand kits
    "CreateBrandKitUseCase",
    "GetBrandKitUseCase",
    "UpdateBrandKitUseCase",
    "DeleteBrandKitUseCase",
    "CreateShareLinkUseCase",
    "RevokeShareLinkUseCase",
    "GetSharedBrandKitUseCase",
    # Users
    "SyncUserUseCase",
]
