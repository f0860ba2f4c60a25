from uuid import UUID

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.app import create_app
from src.domain.entities import Profile
from tests.fixtures.json_loader import FixtureLoader
from tests.utils.auth import API, auth_headers


@pytest_asyncio.fixture
def test_data():
    return FixtureLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def users(db_session, test_data):
    """Profiles for every seed user, keyed by nickname"""
    seeded = test_data.get_copy("users")
    for user in seeded.values():
        db_session.add(
            Profile(id=UUID(user["id"]), email=user["email"], full_name=user["full_name"])
        )
    await db_session.commit()
    return seeded


@pytest_asyncio.fixture
async def client(engine):
    app = create_app(ApplicationConfig, engine=engine)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def club(client, users, test_data):
    """A club owned by the owner, with admin and member already joined"""
    response = await client.post(
        f"{API}/clubs",
        json=test_data.get_copy("club_payload"),
        headers=auth_headers(users["owner"]),
    )
    assert response.status_code == 201
    club = response.json()["data"]

    for nickname, role in (("admin", "admin"), ("member", "member")):
        invite = await client.post(
            f"{API}/clubs/{club['id']}/invite-email",
            json={"email": users[nickname]["email"], "role": role},
            headers=auth_headers(users["owner"]),
        )
        assert invite.status_code == 201
        accepted = await client.post(
            f"{API}/clubs/{club['id']}/accept-invitation",
            headers=auth_headers(users[nickname]),
        )
        assert accepted.status_code == 200

    return club
