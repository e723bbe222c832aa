from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.members import RemoveMemberUseCase
from src.domain.entities import Business, BusinessMember, MemberRole


@pytest.fixture
def business(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    mock_uow.businesses.get_by_id.return_value = business
    return business


@pytest.mark.asyncio
async def test_viewer_leaves_without_permission_check(mock_uow, business):
    viewer = BusinessMember(business_id=business.id, user_id=uuid4(), role=MemberRole.viewer)
    mock_uow.members.get_by_business_and_user.return_value = viewer
    permissions = MagicMock()
    permissions.can_manage_team = AsyncMock(return_value=False)

    use_case = RemoveMemberUseCase(mock_uow, permissions=permissions)
    result = await use_case.execute(business.id, viewer.user_id, viewer.user_id)

    assert result.is_ok()
    assert result.value.success is True
    permissions.can_manage_team.assert_not_called()
    mock_uow.members.delete.assert_called_once_with(viewer)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_viewer_cannot_remove_someone_else(mock_uow, business):
    viewer_id = uuid4()
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=viewer_id, role=MemberRole.viewer
    )

    result = await RemoveMemberUseCase(mock_uow).execute(business.id, viewer_id, uuid4())

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.members.delete.assert_not_called()


@pytest.mark.asyncio
async def test_owner_removes_member(mock_uow, business):
    member = BusinessMember(business_id=business.id, user_id=uuid4(), role=MemberRole.editor)
    mock_uow.members.get_by_business_and_user.return_value = member

    result = await RemoveMemberUseCase(mock_uow).execute(
        business.id, business.owner_user_id, member.user_id
    )

    assert result.is_ok()
    mock_uow.members.delete.assert_called_once_with(member)


@pytest.mark.asyncio
async def test_admin_cannot_remove_owner(mock_uow, business):
    admin_id = uuid4()
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=admin_id, role=MemberRole.admin
    )

    result = await RemoveMemberUseCase(mock_uow).execute(
        business.id, admin_id, business.owner_user_id
    )

    assert result.error.code == "CANNOT_REMOVE_OWNER"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_owner_cannot_leave(mock_uow, business):
    result = await RemoveMemberUseCase(mock_uow).execute(
        business.id, business.owner_user_id, business.owner_user_id
    )

    assert result.error.code == "CANNOT_REMOVE_OWNER"
