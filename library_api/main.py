"""
Application entry point.

Creates the FastAPI application and wires together:
- Database engine and schema (created on startup)
- Routers (books, categories, customers, login, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from library_api.core.config import Settings, settings
from library_api.infrastructure.database import create_db_engine, create_schema
from library_api.interfaces.health import router as health_router
from library_api.interfaces.library.router import (
    books_router,
    categories_router,
    create_auth_router,
    customers_router,
)
from library_api.shared.errors.handlers import register_error_handlers
from library_api.shared.logging import configure_logging
from library_api.shared.security.headers import SecurityHeadersMiddleware
from library_api.shared.security.rate_limiting import create_limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create the schema, dispose the pool on shutdown."""
    create_schema(app.state.engine)
    logger.info("%s %s started", app.title, app.version)

    yield

    app.state.engine.dispose()
    logger.info("Database connections released")


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        config: Settings to build the application with. Defaults to the
            settings loaded from the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    config = config or settings
    configure_logging(level=config.log_level)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.engine = create_db_engine(config)

    # --- Rate Limiting ---
    limiter = create_limiter(config)
    app.state.limiter = limiter

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app, realm=config.jwt_realm)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(create_auth_router(limiter, config.rate_limit_login))
    app.include_router(customers_router)
    app.include_router(categories_router)
    app.include_router(books_router)

    return app


app = create_app()
