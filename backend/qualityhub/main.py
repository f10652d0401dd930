"""FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from backend.qualityhub.api.errors import register_exception_handlers
from backend.qualityhub.api.routes.action_plans import router as action_plans_router
from backend.qualityhub.api.routes.audit_logs import router as audit_logs_router
from backend.qualityhub.api.routes.health import router as health_router
from backend.qualityhub.api.routes.metrics import router as metrics_router
from backend.qualityhub.api.routes.risks import router as risks_router
from backend.qualityhub.api.routes.standards import router as standards_router
from backend.qualityhub.config import get_settings
from backend.qualityhub.db.engine import create_async_engine_from_settings, create_session_factory
from backend.qualityhub.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the engine once per process and dispose of it on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)

    engine = create_async_engine_from_settings(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Database engine ready", extra={"structured": {"dialect": engine.dialect.name}})

    try:
        yield
    finally:
        await engine.dispose()


def create_app() -> FastAPI:
    """Assemble the application: routers and data-layer error handlers."""
    app = FastAPI(title="QualityHub API", version="0.1.0", lifespan=lifespan)

    register_exception_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(metrics_router, tags=["metrics"])
    app.include_router(risks_router)
    app.include_router(action_plans_router)
    app.include_router(standards_router)
    app.include_router(audit_logs_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": "QualityHub API", "version": "0.1.0"}

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run("backend.qualityhub.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
