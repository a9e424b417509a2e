import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from shared.config.database import Database
from shared.config.settings import Settings
from shared.errors import register_error_handlers
from shared.observability import setup_observability

from services.order_service.router import router as order_router
from services.product_service.router import router as product_router
from services.order_product_service.router import router as order_product_router

logger = structlog.get_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="Order Management Service", version="1.0.0")
    app.state.settings = settings

    # --- OBSERVABILITY BOOTSTRAP ---
    setup_observability(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(order_router)
    app.include_router(product_router)
    app.include_router(order_product_router)

    @app.get("/health")
    async def health_check(request: Request):
        database: Database | None = getattr(request.app.state, "db", None)
        db_ok = await database.ping() if database else False
        return {
            "service": settings.service_name,
            "status": "running",
            "database": "ok" if db_ok else "unavailable",
        }

    @app.on_event("startup")
    async def startup_event():
        # The pool lives as long as the process; requests only check sessions out
        app.state.db = Database.from_settings(settings)
        if settings.create_schema:
            # An unreachable database must not keep the service from starting;
            # requests report the failure as 500s instead
            try:
                await app.state.db.create_all()
            except (SQLAlchemyError, OSError) as e:
                logger.error("schema_setup_failed", error=str(e))
        logger.info("service_started", service=settings.service_name)

    @app.on_event("shutdown")
    async def shutdown_event():
        database: Database | None = getattr(app.state, "db", None)
        if database is not None:
            await database.dispose()
        logger.info("service_stopped", service=settings.service_name)

    return app


settings = Settings()
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port or 8000)
