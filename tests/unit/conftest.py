import pytest
from unittest.mock import AsyncMock, MagicMock


def _repository(getters, writers):
    repo = MagicMock()
    for name in getters:
        setattr(repo, name, AsyncMock(return_value=None))
    for name in writers:
        # Writes hand back the entity they were given
        setattr(repo, name, AsyncMock(side_effect=lambda entity: entity))
    repo.delete = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository(["get_by_id", "get_by_email"], ["create", "update"])
    uow.businesses = _repository(
        ["get_by_id", "get_by_owner_and_slug"], ["create", "update"]
    )
    uow.businesses.list_accessible = AsyncMock(return_value=([], 0))
    uow.members = _repository(["get_by_business_and_user"], ["create", "update"])
    uow.members.get_by_business_with_users = AsyncMock(return_value=[])
    uow.invitations = _repository(
        ["get_by_id", "get_by_token", "get_pending_by_business_and_email"],
        ["create", "update"],
    )
    uow.invitations.get_pending_by_business_with_inviters = AsyncMock(return_value=[])
    uow.access_requests = _repository(
        ["get_by_id", "get_pending_by_business_and_user"], ["create", "update"]
    )
    uow.access_requests.get_pending_by_business_with_users = AsyncMock(return_value=[])
    uow.brand_kits = _repository(
        ["get_by_business", "get_by_share_token"], ["create", "update"]
    )
    return uow
