"""
Team Collaboration Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MemberRole(str, Enum):
    """Role stored on a membership row"""

    admin = "admin"
    editor = "editor"
    viewer = "viewer"


class BusinessRole(str, Enum):
    """Effective role of a user on a business (owner is implicit)"""

    owner = "owner"
    admin = "admin"
    editor = "editor"
    viewer = "viewer"


class PermissionAction(str, Enum):
    """Capabilities gated by role"""

    view = "view"
    edit = "edit"
    manage_team = "manage_team"
    delete = "delete"


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    expired = "expired"


class AccessRequestStatus(str, Enum):
    """Access request status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
