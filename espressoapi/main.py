from __future__ import annotations

from contextlib import asynccontextmanager

import sentry_sdk
import structlog
import uvicorn
from fastapi import FastAPI
from sentry_sdk.integrations.starlette import StarletteIntegration

from espressoapi.api import errors
from espressoapi.api.routers import (
    beans_router,
    ping_router,
    roasters_router,
    sheets_router,
    shots_router,
)
from espressoapi.core.config import Settings, get_settings
from espressoapi.db import create_engine, create_schema, create_session_factory
from espressoapi.logging import setup_logging
from espressoapi.middleware import (
    max_body_size_middleware,
    request_id_middleware,
    timeout_middleware,
)
from espressoapi.repositories.sqlalchemy import translator_for_dialect


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    # Initialize structured logging first
    setup_logging(settings.logger_log_level, settings.logger_format)
    logger = structlog.get_logger(__name__)

    # Initialize Sentry (no-op if DSN is missing)
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.app_env,
            integrations=[StarletteIntegration()],
            traces_sample_rate=0.0,
            send_default_pii=False,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(settings.database_url, settings.database_type)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.error_translator = translator_for_dialect(engine.dialect.name)
        if settings.database_create_schema:
            await create_schema(engine)
        logger.info(
            "app_startup",
            env=settings.app_env,
            database_type=settings.database_type,
            dialect=engine.dialect.name,
        )
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("app_shutdown")

    app = FastAPI(title="Espresso API", lifespan=lifespan)
    errors.install(app)

    # Last registered runs first: request id wraps the size check, which wraps the deadline
    app.middleware("http")(timeout_middleware(settings.request_timeout_seconds))
    app.middleware("http")(max_body_size_middleware(settings.server_max_request_size))
    app.middleware("http")(request_id_middleware)

    app.include_router(ping_router)
    app.include_router(sheets_router)
    app.include_router(roasters_router)
    app.include_router(beans_router)
    app.include_router(shots_router)
    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
