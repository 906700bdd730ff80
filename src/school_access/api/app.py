"""
school_access.api.app

FastAPI app factory for the School Access service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (user directory, DB engine).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from school_access.api.errors import install_error_handlers
from school_access.api.routers.auth import router as auth_router
from school_access.api.routers.health import router as health_router
from school_access.api.routers.students import router as students_router
from school_access.auth.passwords import PasswordHasher
from school_access.db.init_db import init_db
from school_access.db.repositories.users import SqlUserDirectory
from school_access.db.session import create_engine, create_sessionmaker
from school_access.directory.memory import InMemoryUserDirectory
from school_access.observability.logging import configure_logging, get_logger
from school_access.observability.middleware import RequestContextMiddleware
from school_access.services.provisioning import bootstrap_teacher
from school_access.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, directory_backend=settings.directory_backend)
        app.state.hasher = PasswordHasher(settings.password_schemes)
        app.state.directory = None
        app.state.engine = None

        if settings.directory_backend == "memory":
            app.state.directory = InMemoryUserDirectory()
            await bootstrap_teacher(app.state.directory, settings, app.state.hasher)
        else:
            engine = create_engine(settings)
            app.state.engine = engine
            app.state.sessionmaker = create_sessionmaker(engine)
            if settings.env in ("dev", "test"):
                # Dev/test convenience: create tables automatically.
                await init_db(engine)
            async with app.state.sessionmaker() as session:
                await bootstrap_teacher(SqlUserDirectory(session), settings, app.state.hasher)

        try:
            yield
        finally:
            if app.state.engine is not None:
                await app.state.engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="School Access",
        version="0.1.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    install_error_handlers(app, settings)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(students_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; decisions stay
# in auth/policy and services.
