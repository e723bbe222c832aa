"""
Team Collaboration Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccessRequestStatus,
    BusinessRole,
    InvitationStatus,
    MemberRole,
    PermissionAction,
)

# Export all entities
from .user import User
from .business import Business
from .business_member import BusinessMember
from .business_invitation import BusinessInvitation
from .business_access_request import BusinessAccessRequest
from .brand_kit import BrandKit

__all__ = [
    # Enums
    "AccessRequestStatus",
    "BusinessRole",
    "InvitationStatus",
    "MemberRole",
    "PermissionAction",
    # Entities
    "User",
    "Business",
    "BusinessMember",
    "BusinessInvitation",
    "BusinessAccessRequest",
    "BrandKit",
]
