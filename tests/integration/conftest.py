import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401 - registers tables on SQLModel.metadata
from tests.fixtures.json_loader import TestDataLoader
from src.adapter.services.mailer import PreviewMailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_mailer, get_unit_of_work


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    from config import ApplicationConfig

    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


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


@pytest.fixture
def mailer():
    return PreviewMailer(limit=10)


@pytest_asyncio.fixture
async def app(db_session, mailer):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mailer] = lambda: mailer
    return app


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def items(db_session, test_data):
    from src.domain.entities import InventoryItem

    created = [InventoryItem(**data) for data in test_data.get_copy("items")]
    db_session.add_all(created)
    await db_session.commit()
    return created
