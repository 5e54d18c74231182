import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from spendwise.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from spendwise.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from spendwise.api.app import create_app
from spendwise.config import ApplicationConfig
from spendwise.depends import get_expose_reset_token, get_password_hasher, get_unit_of_work
from spendwise.domain import entities  # noqa: F401 - registers tables on SQLModel.metadata

# Minimum bcrypt cost keeps the suite fast
TEST_PASSWORD_HASHER = BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
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
async def app(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: TEST_PASSWORD_HASHER
    # Development posture so tests can read reset tokens from responses
    app.dependency_overrides[get_expose_reset_token] = lambda: True

    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
