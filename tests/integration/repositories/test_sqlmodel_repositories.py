from uuid import uuid4

import pytest

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.errors import UniqueViolationError
from src.app.services.member_service import MemberService
from src.domain.entities import Business, BusinessMember, MemberRole, User


async def seed(uow):
    owner = await uow.users.create(User(id=uuid4(), email="owner@acme.com"))
    member = await uow.users.create(User(id=uuid4(), email="Ed@Example.com"))
    business = await uow.businesses.create(
        Business(owner_user_id=owner.id, name="Acme", slug="acme", industry="Retail")
    )
    return owner, member, business


@pytest.mark.asyncio
async def test_duplicate_member_insert_raises_unique_violation(db_session):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        _, member, business = await seed(uow)
        await uow.members.create(
            BusinessMember(business_id=business.id, user_id=member.id, role=MemberRole.viewer)
        )

        with pytest.raises(UniqueViolationError):
            await uow.members.create(
                BusinessMember(business_id=business.id, user_id=member.id, role=MemberRole.editor)
            )


@pytest.mark.asyncio
async def test_second_add_member_fails_already_member(db_session):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        _, member, business = await seed(uow)
        members = MemberService(uow)

        first = await members.add_member(business.id, member.id, MemberRole.viewer)
        second = await members.add_member(business.id, member.id, MemberRole.viewer)

        assert first.is_ok()
        assert second.error.code == "ALREADY_MEMBER"
        rows = await uow.members.get_by_business_with_users(business.id)
        assert len(rows) == 1


@pytest.mark.asyncio
async def test_email_lookup_ignores_case(db_session):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        _, member, _ = await seed(uow)

        found = await uow.users.get_by_email("ed@example.COM")

        assert found.id == member.id


@pytest.mark.asyncio
async def test_list_accessible_covers_owned_and_joined(db_session):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        owner, member, business = await seed(uow)
        other = await uow.businesses.create(
            Business(owner_user_id=member.id, name="Ed's", slug="eds", industry="Media")
        )
        await uow.businesses.create(
            Business(owner_user_id=owner.id, name="Hidden", slug="hidden")
        )
        await uow.members.create(
            BusinessMember(business_id=business.id, user_id=member.id, role=MemberRole.editor)
        )

        rows, total = await uow.businesses.list_accessible(member.id, sort="name", order="asc")
        retail, retail_total = await uow.businesses.list_accessible(
            member.id, industry="Retail"
        )

        assert total == 2
        assert [(b.slug, role) for b, role in rows] == [
            ("acme", MemberRole.editor),
            ("eds", None),
        ]
        assert retail_total == 1
        assert retail[0][0].id == business.id
        assert other.owner_user_id == member.id


@pytest.mark.asyncio
async def test_reassigned_email_keeps_both_identities(db_session):
    from datetime import timedelta

    from src.domain.base import utcnow

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        stale = await uow.users.create(
            User(
                id=uuid4(),
                email="shared@example.com",
                updated_at=utcnow() - timedelta(days=30),
            )
        )
        current = await uow.users.create(User(id=uuid4(), email="shared@example.com"))

        found = await uow.users.get_by_email("shared@example.com")

        assert found.id == current.id
        assert await uow.users.get_by_id(stale.id) is not None
