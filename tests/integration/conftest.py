from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.api.utils.jwt import create_access_token
from src.depends import enable_sqlite_foreign_keys, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user():
    """Returns (user_id, headers) for a fresh identity with a signed token"""

    def _make_user(email: str, full_name: str = None):
        user_id = str(uuid4())
        token = create_access_token(user_id, email, full_name)
        return user_id, {"Authorization": f"Bearer {token}"}

    return _make_user


@pytest.fixture
def create_business(client):
    async def _create_business(headers: dict, slug: str = "acme", name: str = "Acme"):
        response = await client.post(
            "/businesses", json={"name": name, "slug": slug}, headers=headers
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create_business


@pytest.fixture
def join_as(client):
    """Adds a member through the access request flow"""

    async def _join_as(business_id: str, owner: dict, member: dict, role: str):
        request = await client.post(
            f"/businesses/{business_id}/access-requests",
            json={"requested_role": role},
            headers=member,
        )
        assert request.status_code == 201, request.text
        approve = await client.post(
            f"/businesses/{business_id}/access-requests/{request.json()['id']}/approve",
            headers=owner,
        )
        assert approve.status_code == 200, approve.text

    return _join_as
