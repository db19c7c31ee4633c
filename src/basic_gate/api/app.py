"""
basic_gate.api.app

FastAPI app factory for the Basic-Auth gate service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Parse the role allow-list before serving (a bad config fails construction).
- Initialize and dispose shared infrastructure (DB engine/session factory) in the lifespan.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from basic_gate import __version__
from basic_gate.api.routers.dev_users import router as dev_users_router
from basic_gate.api.routers.health import router as health_router
from basic_gate.api.routers.me import router as me_router
from basic_gate.auth.gate import BasicAuthGate
from basic_gate.auth.middleware import BasicAuthMiddleware
from basic_gate.auth.passwords import build_hasher
from basic_gate.auth.roles import configure
from basic_gate.db.init_db import init_db
from basic_gate.db.session import create_engine, create_sessionmaker
from basic_gate.observability.logging import configure_logging, get_logger
from basic_gate.observability.middleware import RequestContextMiddleware
from basic_gate.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    # Raises ConfigError when no roles are configured.
    allow_list = configure(settings.role_names_comma_sep)
    gate = BasicAuthGate(allow_list, split_on_first_separator=settings.split_on_first_separator)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, roles=list(allow_list))
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod should use Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Basic-Auth API Gate",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.password_hasher = build_hasher(
        time_cost=settings.password_hash_time_cost,
        memory_cost=settings.password_hash_memory_kib,
        parallelism=settings.password_hash_parallelism,
    )

    # Last added runs first: request context wraps the gate.
    app.add_middleware(
        BasicAuthMiddleware,
        gate=gate,
        path_prefix=settings.protected_path_prefix,
        realm=settings.realm,
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(dev_users_router)
    app.include_router(me_router, prefix=settings.protected_path_prefix)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; credential and role logic stays in `basic_gate.auth`.
