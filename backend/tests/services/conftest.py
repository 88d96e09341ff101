"""Service test fixtures — async DB, fake collaborators and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - get_view_cache overridden with a fresh PathRevisionCache per test
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency
    - PRAGMA foreign_keys=ON on every connection so constraint behavior
      matches PostgreSQL
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import dashboard.infrastructure.database as db_module
from dashboard.db.base import Base
from dashboard.infrastructure.database import DatabaseSessionManager, get_db
from dashboard.infrastructure.view_cache import PathRevisionCache, get_view_cache
from dashboard.main import app
from dashboard.models import Customer, Invoice, User

CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"
USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def view_cache():
    return PathRevisionCache()


@pytest.fixture
async def client(test_engine, test_session_factory, view_cache):
    """FastAPI test client with DB and cache dependencies overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_view_cache] = lambda: view_cache

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_customer(test_db):
    customer = Customer(
        id=CUSTOMER_ID, name="Delba de Oliveira", email="delba@oliveira.com",
        image_url="/customers/delba-de-oliveira.png",
    )
    test_db.add(customer)
    await test_db.commit()
    return customer


@pytest.fixture
async def seed_invoice(test_db, seed_customer):
    invoice = Invoice(
        customer_id=seed_customer.id, amount=15795,
        status="pending", date=date(2022, 12, 6),
    )
    test_db.add(invoice)
    await test_db.commit()
    await test_db.refresh(invoice)
    return invoice


@pytest.fixture
async def seed_user(test_db):
    user = User(name="User", email=USER_EMAIL)
    user.set_password(USER_PASSWORD)
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
def fake_repository():
    """InvoiceRepository fake: records calls, configurable failures."""
    repo = AsyncMock()
    repo.insert.return_value = "new-invoice-id"
    repo.update.return_value = 1
    repo.delete.return_value = 1
    return repo


@pytest.fixture
def fake_cache():
    """ViewCache fake: assert invalidate() awaits."""
    return AsyncMock()
