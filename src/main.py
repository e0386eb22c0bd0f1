"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from src.config import get_settings
from src.infrastructure.database import init_database
from src.infrastructure.observability import (
    init_observability,
    shutdown_observability,
)
from src.modules.login import make_login_controller
from src.modules.login.routes import router as login_router
from src.modules.login.routes import set_login_controller

logger = structlog.get_logger()
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan handler for startup/shutdown."""
    init_observability(
        settings.app_name,
        settings.app_version,
        otlp_endpoint=settings.otlp_endpoint,
        console_export=settings.tracing_console_export,
        enabled=settings.tracing_enabled,
        sample_rate=settings.tracing_sample_rate,
        json_logs=not settings.debug,
        app=app,
    )

    database = await init_database(settings.database_path)

    if settings.jwt_secret_key:
        set_login_controller(make_login_controller(database, settings))
        logger.info("login_controller_initialized")
    else:
        logger.warning("login_disabled", reason="jwt_secret_key not set")

    yield

    set_login_controller(None)
    await database.disconnect()
    shutdown_observability()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

app.include_router(login_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
