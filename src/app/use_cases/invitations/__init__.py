"""
Invitation Use Cases

Issue, list, look up, accept, decline and revoke business invitations.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .decline_invitation_use_case import DeclineInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    BusinessSummary,
    DeclineInvitationResponse,
    InvitationDetailsResponse,
    InvitationListResponse,
    InvitationResponse,
    RevokeInvitationResponse,
)
from .get_invitation_use_case import GetInvitationUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .revoke_invitation_use_case import RevokeInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "RevokeInvitationUseCase",
    "InvitationResponse",
    "InvitationListResponse",
    "InvitationDetailsResponse",
    "AcceptInvitationResponse",
    "DeclineInvitationResponse",
    "RevokeInvitationResponse",
    "BusinessSummary",
]
