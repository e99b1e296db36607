"""Application configuration and router setup."""

import fastapi
from fastapi.middleware import cors

from components.core import config, errors, init_db
from components.core.database import DatabaseManager
from components.core.logging_config import configure_logging
from restapi.endpoints import health_check, income, recurring, expenses, debts, summary

settings = config.get_settings()


def create_app(db_manager: DatabaseManager | None = None) -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(
        "DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
        json=settings.LOG_JSON,
    )

    app = fastapi.FastAPI(
        title="Personal Finance API",
        description="Track income, recurring bills, one-time expenses and debts",
        version="1.0.0",
        lifespan=init_db.lifespan,
    )

    # Initialize database
    init_db.init_db(app, db_manager)

    errors.register_exception_handlers(app)

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health_check.router)
    for resource in (income, recurring, expenses, debts, summary):
        app.include_router(resource.router, prefix=settings.API_PREFIX)

    return app
