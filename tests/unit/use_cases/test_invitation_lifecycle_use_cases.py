from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.invitations import (
    DeclineInvitationUseCase,
    GetInvitationUseCase,
    ListInvitationsUseCase,
    RevokeInvitationUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import (
    Business,
    BusinessInvitation,
    InvitationStatus,
    MemberRole,
    User,
)

TOKEN = "e" * 64


@pytest.fixture
def business(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    mock_uow.businesses.get_by_id.return_value = business
    return business


@pytest.fixture
def invitation(mock_uow, business):
    invitation = BusinessInvitation(
        id=uuid4(),
        business_id=business.id,
        email="bob@example.com",
        role=MemberRole.viewer,
        invited_by=business.owner_user_id,
        token=TOKEN,
        status=InvitationStatus.pending,
        expires_at=utcnow() + timedelta(days=7),
    )
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.invitations.get_by_id.return_value = invitation
    return invitation


@pytest.mark.asyncio
async def test_get_invitation_includes_inviter_and_business(mock_uow, business, invitation):
    mock_uow.users.get_by_id.return_value = User(
        id=business.owner_user_id, email="owner@example.com", full_name="Olive Owner"
    )

    result = await GetInvitationUseCase(mock_uow).execute(TOKEN)

    assert result.is_ok()
    assert result.value.inviter.full_name == "Olive Owner"
    assert result.value.business.slug == "acme"


@pytest.mark.asyncio
async def test_get_expired_invitation_marks_it_expired(mock_uow, invitation):
    invitation.expires_at = utcnow() - timedelta(minutes=1)

    result = await GetInvitationUseCase(mock_uow).execute(TOKEN)

    assert result.error.code == "INVITATION_EXPIRED"
    assert invitation.status == InvitationStatus.expired
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_decline_pending_invitation(mock_uow, invitation):
    result = await DeclineInvitationUseCase(mock_uow).execute(TOKEN)

    assert result.is_ok()
    assert invitation.status == InvitationStatus.declined


@pytest.mark.asyncio
async def test_decline_accepted_invitation_is_rejected(mock_uow, invitation):
    invitation.status = InvitationStatus.accepted

    result = await DeclineInvitationUseCase(mock_uow).execute(TOKEN)

    assert result.error.code == "INVITATION_NO_LONGER_VALID"
    assert invitation.status == InvitationStatus.accepted


@pytest.mark.asyncio
async def test_revoke_deletes_regardless_of_status(mock_uow, business, invitation):
    invitation.status = InvitationStatus.declined

    result = await RevokeInvitationUseCase(mock_uow).execute(
        business.id, invitation.id, business.owner_user_id
    )

    assert result.is_ok()
    mock_uow.invitations.delete.assert_called_once_with(invitation)


@pytest.mark.asyncio
async def test_revoke_invitation_of_other_business(mock_uow, business, invitation):
    invitation.business_id = uuid4()

    result = await RevokeInvitationUseCase(mock_uow).execute(
        business.id, invitation.id, business.owner_user_id
    )

    assert result.error.code == "INVITATION_NOT_FOUND"
    mock_uow.invitations.delete.assert_not_called()


@pytest.mark.asyncio
async def test_list_invitations_requires_team_management(mock_uow, business):
    result = await ListInvitationsUseCase(mock_uow).execute(business.id, uuid4())

    assert result.error.code == "FORBIDDEN"
