from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.repositories.errors import UniqueViolationError
from src.app.use_cases.brand_kits import (
    ColorData,
    CreateBrandKitUseCase,
    CreateShareLinkUseCase,
    DeleteBrandKitUseCase,
    FontData,
    GetBrandKitUseCase,
    GetSharedBrandKitUseCase,
    RevokeShareLinkUseCase,
    UpdateBrandKitUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import BrandKit, Business, BusinessMember, MemberRole

COLORS = [ColorData(name="Persimmon", hex="#EC5800", usage="Primary")]
FONTS = FontData(primary="Inter", secondary="Lora")


def make_business(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    mock_uow.businesses.get_by_id.return_value = business
    return business


def make_brand_kit(mock_uow, business, **overrides):
    brand_kit = BrandKit(
        business_id=business.id,
        created_by=business.owner_user_id,
        business_name="Acme",
        logo_url="https://cdn.example.com/acme.svg",
        colors=[color.model_dump() for color in COLORS],
        fonts=FONTS.model_dump(),
        **overrides,
    )
    mock_uow.brand_kits.get_by_business.return_value = brand_kit
    return brand_kit


def join(mock_uow, business, role):
    user_id = uuid4()
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=user_id, role=role
    )
    return user_id


@pytest.mark.asyncio
async def test_editor_creates_brand_kit(mock_uow):
    business = make_business(mock_uow)
    editor_id = join(mock_uow, business, MemberRole.editor)

    result = await CreateBrandKitUseCase(mock_uow).execute(
        business.id, editor_id, "Acme", "https://cdn.example.com/acme.svg", COLORS, FONTS
    )

    assert result.is_ok()
    assert result.value.created_by == str(editor_id)
    assert result.value.colors[0].hex == "#EC5800"
    created = mock_uow.brand_kits.create.call_args.args[0]
    assert created.fonts == {"primary": "Inter", "secondary": "Lora"}
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_viewer_cannot_create_brand_kit(mock_uow):
    business = make_business(mock_uow)
    viewer_id = join(mock_uow, business, MemberRole.viewer)

    result = await CreateBrandKitUseCase(mock_uow).execute(
        business.id, viewer_id, "Acme", "https://cdn.example.com/acme.svg", COLORS, FONTS
    )

    assert result.error.code == "FORBIDDEN"
    mock_uow.brand_kits.create.assert_not_called()


@pytest.mark.asyncio
async def test_second_brand_kit_is_rejected(mock_uow):
    business = make_business(mock_uow)
    make_brand_kit(mock_uow, business)

    result = await CreateBrandKitUseCase(mock_uow).execute(
        business.id, business.owner_user_id, "Acme", "logo.png", COLORS, FONTS
    )

    assert result.error.code == "BRAND_KIT_EXISTS"


@pytest.mark.asyncio
async def test_concurrent_brand_kit_insert_is_rejected(mock_uow):
    business = make_business(mock_uow)
    mock_uow.brand_kits.create.side_effect = UniqueViolationError("brand_kits.create")

    result = await CreateBrandKitUseCase(mock_uow).execute(
        business.id, business.owner_user_id, "Acme", "logo.png", COLORS, FONTS
    )

    assert result.error.code == "BRAND_KIT_EXISTS"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_too_many_colors(mock_uow):
    colors = [ColorData(name=f"c{i}", hex="#000000", usage="Accent") for i in range(11)]

    result = await CreateBrandKitUseCase(mock_uow).execute(
        uuid4(), uuid4(), "Acme", "logo.png", colors, FONTS
    )

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_get_brand_kit_requires_a_role(mock_uow):
    business = make_business(mock_uow)
    make_brand_kit(mock_uow, business)

    result = await GetBrandKitUseCase(mock_uow).execute(business.id, uuid4())

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_get_missing_brand_kit(mock_uow):
    business = make_business(mock_uow)

    result = await GetBrandKitUseCase(mock_uow).execute(business.id, business.owner_user_id)

    assert result.error.code == "BRAND_KIT_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_brand_kit_changes_only_given_fields(mock_uow):
    business = make_business(mock_uow)
    brand_kit = make_brand_kit(mock_uow, business, tagline="Bold and bright")
    admin_id = join(mock_uow, business, MemberRole.admin)

    result = await UpdateBrandKitUseCase(mock_uow).execute(
        business.id, admin_id, is_favorite=True
    )

    assert result.value.is_favorite is True
    assert brand_kit.tagline == "Bold and bright"
    mock_uow.brand_kits.update.assert_called_once_with(brand_kit)


@pytest.mark.asyncio
async def test_admin_cannot_delete_brand_kit(mock_uow):
    business = make_business(mock_uow)
    make_brand_kit(mock_uow, business)
    admin_id = join(mock_uow, business, MemberRole.admin)

    result = await DeleteBrandKitUseCase(mock_uow).execute(business.id, admin_id)

    assert result.error.code == "FORBIDDEN"
    mock_uow.brand_kits.delete.assert_not_called()


@pytest.mark.asyncio
async def test_owner_deletes_brand_kit(mock_uow):
    business = make_business(mock_uow)
    brand_kit = make_brand_kit(mock_uow, business)

    result = await DeleteBrandKitUseCase(mock_uow).execute(
        business.id, business.owner_user_id
    )

    assert result.value.success is True
    mock_uow.brand_kits.delete.assert_called_once_with(brand_kit)


@pytest.mark.asyncio
async def test_share_link_uses_injected_random_bytes(mock_uow):
    business = make_business(mock_uow)
    brand_kit = make_brand_kit(mock_uow, business)

    use_case = CreateShareLinkUseCase(
        mock_uow, random_bytes=lambda n: b"\x01" * n, base_url="https://app.example.com/"
    )
    result = await use_case.execute(business.id, business.owner_user_id, expires_in_days=3)

    assert result.value.token == "01" * 32
    assert result.value.share_url == f"https://app.example.com/share/{'01' * 32}"
    assert brand_kit.share_token == "01" * 32
    assert brand_kit.share_expires_at > utcnow() + timedelta(days=2)


@pytest.mark.asyncio
async def test_share_link_without_expiry(mock_uow):
    business = make_business(mock_uow)
    brand_kit = make_brand_kit(
        mock_uow, business, share_token="aa" * 32, share_expires_at=utcnow()
    )

    result = await CreateShareLinkUseCase(mock_uow).execute(
        business.id, business.owner_user_id
    )

    assert result.value.expires_at is None
    assert brand_kit.share_expires_at is None
    assert brand_kit.share_token != "aa" * 32


@pytest.mark.asyncio
async def test_viewer_cannot_share(mock_uow):
    business = make_business(mock_uow)
    make_brand_kit(mock_uow, business)
    viewer_id = join(mock_uow, business, MemberRole.viewer)

    result = await CreateShareLinkUseCase(mock_uow).execute(business.id, viewer_id)

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_revoke_share_link_clears_token(mock_uow):
    business = make_business(mock_uow)
    brand_kit = make_brand_kit(mock_uow, business, share_token="ab" * 32)

    result = await RevokeShareLinkUseCase(mock_uow).execute(
        business.id, business.owner_user_id
    )

    assert result.value.success is True
    assert brand_kit.share_token is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_shared_view_is_counted(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    brand_kit = make_brand_kit(mock_uow, business, share_token="cd" * 32)
    mock_uow.brand_kits.get_by_share_token.return_value = brand_kit

    result = await GetSharedBrandKitUseCase(mock_uow).execute("cd" * 32)

    assert result.value.business_name == "Acme"
    assert result.value.view_count == 1
    assert "created_by" not in result.value.model_dump()


@pytest.mark.asyncio
async def test_expired_share_link_is_not_found(mock_uow):
    business = Business(id=uuid4(), owner_user_id=uuid4(), name="Acme", slug="acme")
    brand_kit = make_brand_kit(
        mock_uow,
        business,
        share_token="ef" * 32,
        share_expires_at=utcnow() - timedelta(minutes=1),
    )
    mock_uow.brand_kits.get_by_share_token.return_value = brand_kit

    result = await GetSharedBrandKitUseCase(mock_uow).execute("ef" * 32)

    assert result.error.code == "SHARE_LINK_NOT_FOUND"
    assert brand_kit.view_count == 0
