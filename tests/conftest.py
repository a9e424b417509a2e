import os
from decimal import Decimal

# Keep the module-level app away from any real database or collector
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.pop("OTLP_ENDPOINT", None)

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, select
from sqlalchemy.pool import StaticPool

from main import app
from shared.config.database import Database
from services.order_service.models import Order
from services.product_service.models import Product
from services.order_product_service.models import OrderProduct


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite leaves FK enforcement (and ON DELETE CASCADE) off per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def database():
    # StaticPool: every session shares the one in-memory connection
    db = Database(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(db.engine.sync_engine, "connect", _enable_foreign_keys)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def client(database):
    app.state.db = database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    del app.state.db


@pytest.fixture
async def products(database):
    async with database.session() as session:
        async with session.begin():
            session.add_all([
                Product(id=1, name="Widget", unit_price=Decimal("9.99")),
                Product(id=2, name="Gadget", unit_price=Decimal("2.50")),
            ])
    return {1: Decimal("9.99"), 2: Decimal("2.50")}


@pytest.fixture
async def orders(database):
    async with database.session() as session:
        async with session.begin():
            session.add_all([
                Order(id=5, order_number="ORD-5"),
                Order(id=6, order_number="ORD-6"),
            ])
    return [5, 6]


@pytest.fixture
async def order(database):
    async with database.session() as session:
        async with session.begin():
            row = Order(order_number="ORD-100")
            session.add(row)
        return row.id


@pytest.fixture
def fetch_lines(database):
    """Read order_products rows directly, bypassing the API."""
    async def _fetch(order_id=None):
        async with database.session() as session:
            stmt = select(OrderProduct)
            if order_id is not None:
                stmt = stmt.where(OrderProduct.order_id == order_id)
            result = await session.execute(stmt)
            return result.scalars().all()
    return _fetch
