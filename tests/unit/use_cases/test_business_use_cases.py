from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.app.repositories.errors import RepositoryError
from src.app.use_cases.businesses import (
    CheckSlugUseCase,
    CreateBusinessUseCase,
    DeleteBusinessUseCase,
    ListBusinessesUseCase,
    UpdateBusinessUseCase,
)
from src.app.use_cases.businesses.validation import validate_slug
from src.domain.entities import Business, BusinessMember, MemberRole


@pytest.mark.parametrize("slug", ["acme", "acme-co", "a1-b2"])
def test_valid_slugs(slug):
    assert validate_slug(slug) is None


@pytest.mark.parametrize("slug", ["", "Acme", "acme_co", "-acme", "acme-", "a" * 256])
def test_invalid_slugs(slug):
    assert validate_slug(slug).code == "INVALID_SLUG"


@pytest.mark.asyncio
async def test_create_business(mock_uow):
    owner_id = uuid4()

    result = await CreateBusinessUseCase(mock_uow).execute(
        owner_id, "Acme", "acme", industry="Retail"
    )

    assert result.is_ok()
    assert result.value.role == "owner"
    assert result.value.owner_user_id == str(owner_id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_business_slug_taken(mock_uow):
    owner_id = uuid4()
    mock_uow.businesses.get_by_owner_and_slug.return_value = Business(
        owner_user_id=owner_id, name="Old", slug="acme"
    )

    result = await CreateBusinessUseCase(mock_uow).execute(owner_id, "Acme", "acme")

    assert result.error.code == "SLUG_TAKEN"


@pytest.mark.asyncio
async def test_store_failure_becomes_store_error(mock_uow):
    mock_uow.businesses.get_by_owner_and_slug.side_effect = RepositoryError(
        "businesses.get_by_owner_and_slug"
    )

    result = await CreateBusinessUseCase(mock_uow).execute(uuid4(), "Acme", "acme")

    assert result.error.code == "STORE_ERROR"
    assert "Please try again" in result.error.message


@pytest.mark.parametrize(
    "failure",
    [
        RepositoryError("uow.commit"),
        OperationalError("COMMIT", {}, Exception("database is locked")),
    ],
)
@pytest.mark.asyncio
async def test_commit_failure_becomes_store_error(mock_uow, failure):
    mock_uow.commit = AsyncMock(side_effect=failure)

    result = await CreateBusinessUseCase(mock_uow).execute(uuid4(), "Acme", "acme")

    assert result.error.code == "STORE_ERROR"
    assert "database is locked" not in result.error.message


@pytest.mark.asyncio
async def test_list_businesses_reports_caller_role(mock_uow):
    user_id = uuid4()
    owned = Business(id=uuid4(), owner_user_id=user_id, name="Mine", slug="mine")
    joined = Business(id=uuid4(), owner_user_id=uuid4(), name="Theirs", slug="theirs")
    mock_uow.businesses.list_accessible.return_value = (
        [(owned, None), (joined, MemberRole.editor)],
        2,
    )

    result = await ListBusinessesUseCase(mock_uow).execute(user_id)

    assert result.value.total == 2
    assert [b.role for b in result.value.businesses] == ["owner", "editor"]


@pytest.mark.asyncio
async def test_viewer_cannot_update_business(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    viewer_id = uuid4()
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=viewer_id, role=MemberRole.viewer
    )

    result = await UpdateBusinessUseCase(mock_uow).execute(
        business.id, viewer_id, name="Renamed"
    )

    assert result.error.code == "FORBIDDEN"
    assert business.name == "Acme"


@pytest.mark.asyncio
async def test_editor_updates_business(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    editor_id = uuid4()
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=editor_id, role=MemberRole.editor
    )

    result = await UpdateBusinessUseCase(mock_uow).execute(
        business.id, editor_id, name="Acme Ltd", description="Now limited"
    )

    assert result.is_ok()
    assert result.value.name == "Acme Ltd"
    assert result.value.slug == "acme"


@pytest.mark.asyncio
async def test_admin_cannot_delete_business(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    admin_id = uuid4()
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=admin_id, role=MemberRole.admin
    )

    result = await DeleteBusinessUseCase(mock_uow).execute(business.id, admin_id)

    assert result.error.code == "FORBIDDEN"
    mock_uow.businesses.delete.assert_not_called()


@pytest.mark.asyncio
async def test_check_slug_available(mock_uow):
    result = await CheckSlugUseCase(mock_uow).execute(uuid4(), "fresh-slug")

    assert result.value.available is True
