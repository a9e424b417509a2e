from httpx import ASGITransport, AsyncClient

from main import create_app
from shared.config.settings import Settings

UNREACHABLE_URL = "sqlite+aiosqlite:////nonexistent/dir/orders.db"


async def test_startup_survives_unreachable_database():
    app = create_app(Settings(_env_file=None, DATABASE_URL=UNREACHABLE_URL))

    for handler in app.router.on_startup:
        await handler()
    try:
        assert app.state.db is not None

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            res = await c.get("/orders")
            assert res.status_code == 500
            assert res.json()["message"] == "Server error"
            assert "unable to open database file" in res.json()["error"]

            health = await c.get("/health")
            assert health.status_code == 200
            assert health.json()["database"] == "unavailable"
    finally:
        for handler in app.router.on_shutdown:
            await handler()


async def test_startup_skips_schema_when_disabled(monkeypatch):
    app = create_app(Settings(
        _env_file=None,
        DATABASE_URL=UNREACHABLE_URL,
        DB_CREATE_SCHEMA=False,
    ))

    async def fail_create_all(self):
        raise AssertionError("create_all should not run")

    monkeypatch.setattr("shared.config.database.Database.create_all", fail_create_all)

    for handler in app.router.on_startup:
        await handler()
    for handler in app.router.on_shutdown:
        await handler()
