# tests/conftest.py
import os

# Point the app at an in-memory database before storefront.database is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("ENVIRONMENT", "test")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storefront.core.config import Settings
from storefront.dependencies import get_db
from storefront.database import Base
from storefront.integrations.hooks import HookRegistry
from storefront.services.notification_rules import register_notification_hooks
from storefront.services.record_store import SQLAlchemyRecordStore
from storefront import models  # noqa: F401

from tests.mocks.mock_store import MockRecordStore

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="session")
def settings():
    """Provide test settings"""
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        ENVIRONMENT="test",
    )


@pytest.fixture
def hooks(settings):
    """Hook registry with the notification rules bound."""
    registry = HookRegistry()
    register_notification_hooks(registry, settings)
    return registry


@pytest.fixture
def mock_store(hooks):
    """In-memory record store wired to the notification hooks."""
    return MockRecordStore(hooks=hooks)


@pytest.fixture
async def test_engine():
    """In-memory SQLite engine with every table created (function-scoped)."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Provide a database session for tests"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def sql_store(db_session, hooks):
    """SQLAlchemy record store over the test database, hooks bound."""
    return SQLAlchemyRecordStore(db_session, hooks)


@pytest.fixture
def sample_product_data():
    """Provide sample product data for tests"""
    return {
        "title": "Linen Shirt",
        "slug": "linen-shirt",
        "sku": "LS-001",
        "price": 49.0,
        "cost": 20.0,
        "profit": 29.0,
        "stockQuantity": 50,
        "reorderLevel": 10,
    }


@pytest.fixture
async def test_client(session_factory, hooks):
    """Async client against the app, sessions on the test database."""
    from storefront.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.hooks = hooks

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
    del app.state.hooks
