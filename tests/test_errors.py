from sqlalchemy.exc import IntegrityError, OperationalError

from services.order_service.repository import OrderRepository
from services.order_product_service.repository import OrderProductRepository


async def test_database_failure_is_server_error(client, monkeypatch):
    async def broken(db):
        raise OperationalError("SELECT * FROM orders", {}, Exception("connection refused"))

    monkeypatch.setattr(OrderRepository, "list_orders", broken)

    res = await client.get("/orders")
    assert res.status_code == 500
    assert res.json() == {"message": "Server error", "error": "connection refused"}


async def test_constraint_violation_is_conflict(client, products, monkeypatch):
    async def violates(db, *args):
        raise IntegrityError("INSERT INTO order_products", {}, Exception("FOREIGN KEY constraint failed"))

    monkeypatch.setattr(OrderProductRepository, "create_line", violates)

    res = await client.post("/order_products", json={"order_id": 5, "product_id": 1, "quantity": 1})
    assert res.status_code == 409
    assert res.json() == {
        "message": "Integrity constraint violated",
        "error": "FOREIGN KEY constraint failed",
    }


async def test_cors_allows_any_origin(client):
    res = await client.get("/products", headers={"Origin": "http://example.com"})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
