import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_members_includes_owner(
    client: AsyncClient, make_user, create_business, join_as
):
    owner_id, owner = make_user("owner@acme.com", "Olive Owner")
    viewer_id, viewer = make_user("vi@example.com", "Vi Ewer")
    business_id = await create_business(owner)
    await join_as(business_id, owner, viewer, "viewer")

    response = await client.get(f"/businesses/{business_id}/members", headers=owner)

    assert response.status_code == 200
    data = response.json()
    assert data["owner"]["id"] == owner_id
    assert data["owner"]["full_name"] == "Olive Owner"
    assert data["members"][0]["user"]["full_name"] == "Vi Ewer"
    assert all(m["user_id"] != owner_id for m in data["members"])


@pytest.mark.asyncio
async def test_viewer_cannot_list_members(
    client: AsyncClient, make_user, create_business, join_as
):
    _, owner = make_user("owner@acme.com")
    _, viewer = make_user("vi@example.com")
    business_id = await create_business(owner)
    await join_as(business_id, owner, viewer, "viewer")

    response = await client.get(f"/businesses/{business_id}/members", headers=viewer)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_viewer_leaves_but_cannot_remove_others(
    client: AsyncClient, make_user, create_business, join_as
):
    _, owner = make_user("owner@acme.com")
    u3_id, u3 = make_user("u3@example.com")
    u4_id, u4 = make_user("u4@example.com")
    business_id = await create_business(owner)
    await join_as(business_id, owner, u3, "viewer")
    await join_as(business_id, owner, u4, "viewer")

    forbidden = await client.delete(
        f"/businesses/{business_id}/members/{u4_id}", headers=u3
    )
    assert forbidden.status_code == 403
    assert forbidden.json()["error"]["code"] == "FORBIDDEN"

    leave = await client.delete(f"/businesses/{business_id}/members/{u3_id}", headers=u3)
    assert leave.status_code == 200
    assert leave.json() == {"success": True}

    members = (await client.get(f"/businesses/{business_id}/members", headers=owner)).json()
    assert [m["user_id"] for m in members["members"]] == [u4_id]


@pytest.mark.asyncio
async def test_owner_cannot_be_removed(client: AsyncClient, make_user, create_business):
    owner_id, owner = make_user("owner@acme.com")
    business_id = await create_business(owner)

    response = await client.delete(
        f"/businesses/{business_id}/members/{owner_id}", headers=owner
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CANNOT_REMOVE_OWNER"


@pytest.mark.asyncio
async def test_update_member_role(
    client: AsyncClient, make_user, create_business, join_as
):
    _, owner = make_user("owner@acme.com")
    member_id, member = make_user("ed@example.com")
    business_id = await create_business(owner)
    await join_as(business_id, owner, member, "editor")

    promote = await client.patch(
        f"/businesses/{business_id}/members/{member_id}",
        json={"role": "admin"},
        headers=owner,
    )
    assert promote.status_code == 200
    assert promote.json()["role"] == "admin"

    invalid = await client.patch(
        f"/businesses/{business_id}/members/{member_id}",
        json={"role": "owner"},
        headers=owner,
    )
    assert invalid.status_code == 400
    assert invalid.json()["error"]["code"] == "VALIDATION_ERROR"

    perms = (await client.get(f"/businesses/{business_id}/permissions", headers=member)).json()
    assert perms["role"] == "admin"
    assert perms["can_manage_team"] is True


@pytest.mark.asyncio
async def test_update_role_of_non_member(client: AsyncClient, make_user, create_business):
    _, owner = make_user("owner@acme.com")
    stranger_id, _ = make_user("stranger@example.com")
    business_id = await create_business(owner)

    response = await client.patch(
        f"/businesses/{business_id}/members/{stranger_id}",
        json={"role": "viewer"},
        headers=owner,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "MEMBER_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_business_cascades(
    client: AsyncClient, make_user, create_business, join_as, db_session
):
    from uuid import UUID

    from sqlmodel import select

    from src.domain.entities import (
        BrandKit,
        BusinessAccessRequest,
        BusinessInvitation,
        BusinessMember,
    )

    _, owner = make_user("owner@acme.com")
    _, member = make_user("ed@example.com")
    _, requester = make_user("req@example.com")
    business_id = await create_business(owner)
    await join_as(business_id, owner, member, "editor")
    await client.post(
        f"/businesses/{business_id}/invitations",
        json={"email": "new@example.com", "role": "viewer"},
        headers=owner,
    )
    await client.post(
        f"/businesses/{business_id}/access-requests",
        json={"requested_role": "viewer"},
        headers=requester,
    )

    await client.post(
        f"/businesses/{business_id}/brand-kit",
        json={
            "business_name": "Acme",
            "logo_url": "https://cdn.example.com/acme.svg",
            "colors": [{"name": "Persimmon", "hex": "#EC5800", "usage": "Primary"}],
            "fonts": {"primary": "Inter", "secondary": "Lora"},
        },
        headers=owner,
    )
    share = await client.post(f"/businesses/{business_id}/brand-kit/share", headers=owner)
    assert share.status_code == 201, share.text

    not_owner = await client.delete(f"/businesses/{business_id}", headers=member)
    assert not_owner.status_code == 403

    response = await client.delete(f"/businesses/{business_id}", headers=owner)
    assert response.status_code == 200

    business_uuid = UUID(business_id)
    for model in (BusinessMember, BusinessInvitation, BusinessAccessRequest, BrandKit):
        result = await db_session.exec(select(model).where(model.business_id == business_uuid))
        assert result.all() == []

    shared = await client.get(f"/share/{share.json()['token']}")
    assert shared.status_code == 404

    gone = await client.get(f"/businesses/{business_id}", headers=owner)
    assert gone.status_code == 404
