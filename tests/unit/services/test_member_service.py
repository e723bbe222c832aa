from uuid import uuid4

import pytest

from src.app.repositories.errors import UniqueViolationError
from src.app.services.member_service import MemberService
from src.domain.entities import Business, BusinessMember, MemberRole


@pytest.fixture
def business(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    mock_uow.businesses.get_by_id.return_value = business
    return business


@pytest.mark.asyncio
async def test_add_member_inserts_row(mock_uow, business):
    user_id = uuid4()
    inviter = business.owner_user_id

    result = await MemberService(mock_uow).add_member(
        business.id, user_id, MemberRole.viewer, invited_by=inviter
    )

    assert result.is_ok()
    member = result.value
    assert member.user_id == user_id
    assert member.role == MemberRole.viewer
    assert member.invited_by == inviter
    mock_uow.members.create.assert_called_once()


@pytest.mark.asyncio
async def test_add_member_twice_fails_already_member(mock_uow, business):
    user_id = uuid4()
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=user_id, role=MemberRole.viewer
    )

    result = await MemberService(mock_uow).add_member(
        business.id, user_id, MemberRole.viewer
    )

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.members.create.assert_not_called()


@pytest.mark.asyncio
async def test_add_member_never_adds_owner(mock_uow, business):
    result = await MemberService(mock_uow).add_member(
        business.id, business.owner_user_id, MemberRole.admin
    )

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.members.create.assert_not_called()


@pytest.mark.asyncio
async def test_add_member_unique_violation_is_already_member(mock_uow, business):
    mock_uow.members.create.side_effect = UniqueViolationError("business_members.create")

    result = await MemberService(mock_uow).add_member(
        business.id, uuid4(), MemberRole.editor
    )

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_update_member_role_overwrites(mock_uow, business):
    member = BusinessMember(business_id=business.id, user_id=uuid4(), role=MemberRole.viewer)
    mock_uow.members.get_by_business_and_user.return_value = member

    result = await MemberService(mock_uow).update_member_role(
        business.id, member.user_id, MemberRole.admin
    )

    assert result.is_ok()
    assert member.role == MemberRole.admin
    mock_uow.members.update.assert_called_once_with(member)


@pytest.mark.asyncio
async def test_update_member_role_missing_member(mock_uow, business):
    result = await MemberService(mock_uow).update_member_role(
        business.id, uuid4(), MemberRole.admin
    )

    assert result.is_err()
    assert result.error.code == "MEMBER_NOT_FOUND"


@pytest.mark.asyncio
async def test_remove_owner_always_fails(mock_uow, business):
    result = await MemberService(mock_uow).remove_member(
        business.id, business.owner_user_id
    )

    assert result.is_err()
    assert result.error.code == "CANNOT_REMOVE_OWNER"
    mock_uow.members.delete.assert_not_called()


@pytest.mark.asyncio
async def test_remove_member_deletes_row(mock_uow, business):
    member = BusinessMember(business_id=business.id, user_id=uuid4(), role=MemberRole.editor)
    mock_uow.members.get_by_business_and_user.return_value = member

    result = await MemberService(mock_uow).remove_member(business.id, member.user_id)

    assert result.is_ok()
    mock_uow.members.delete.assert_called_once_with(member)
