"""Pytest fixtures for async SQLite test database."""
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from billing.database.database import Base, enable_sqlite_foreign_keys, get_db
from billing.models.customer import Customer
from billing.models.invoice import Invoice, Item  # noqa: F401 registers tables and trigger
from billing.models.product import Product


@pytest_asyncio.fixture
async def session_factory():
    """In-memory SQLite database built from the production metadata."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create an async session for testing."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def sample_data(db_session):
    """Customers and products used across invoice tests."""
    customers = [
        Customer(id=1, first_name="Alice", last_name="Martin", street="1 Rue de Rivoli", city="Paris"),
        Customer(id=2, first_name="Bruno", last_name="Durand", street="8 Quai Claude Bernard", city="Lyon"),
        Customer(id=5, first_name="Chloe", last_name="Petit", street="12 Avenue Foch", city="Paris"),
        Customer(id=7, first_name="David", last_name="Moreau", street="3 Place du Capitole", city="Toulouse"),
    ]
    products = [
        Product(id=1, name="Widget", price=Decimal("50.25")),
        Product(id=2, name="Gadget", price=Decimal("20.00")),
        Product(id=3, name="Bolt", price=Decimal("10.00")),
        Product(id=8, name="Gear", price=Decimal("25.00")),
        Product(id=9, name="Free sample", price=Decimal("0.00")),
    ]
    db_session.add_all(customers)
    db_session.add_all(products)
    await db_session.commit()
    return {"customers": customers, "products": products}


@pytest_asyncio.fixture
async def client(session_factory, sample_data):
    """HTTP client bound to the app, using the test database."""
    from billing.app import app

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
