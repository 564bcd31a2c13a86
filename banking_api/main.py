"""
Core Banking API — FastAPI application.

This is the entry point for the application. The ledger
connection pool is owned by the app: created when it starts,
disposed when it stops, and handed to requests through the
get_db dependency. All routers are registered here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from banking_api.config import Settings, get_settings
from banking_api.errors import register_error_handlers
from banking_api.logging_config import setup_logging
from banking_api.models.base import create_ledger_engine, create_session_factory
from banking_api.api.middleware import RequestIDMiddleware
from banking_api.api.health import router as health_router
from banking_api.api.customers import router as customers_router
from banking_api.api.accounts import router as accounts_router
from banking_api.api.transactions import router as transactions_router
from banking_api.api.loans import router as loans_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the ledger pool before serving and close it on shutdown.

    A pool that cannot hand out its first connection aborts
    startup; the process should not accept requests it cannot
    serve.
    """
    settings: Settings = app.state.settings
    engine = create_ledger_engine(settings)
    try:
        with engine.connect():
            pass
    except SQLAlchemyError:
        logger.critical("Ledger connection pool could not be created", exc_info=True)
        engine.dispose()
        raise

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Ledger connection pool created")
    try:
        yield
    finally:
        app.state.session_factory = None
        engine.dispose()
        logger.info("Ledger connection pool closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application"""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="REST facade over the core banking ledger",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Last added runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    register_error_handlers(app)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(customers_router, prefix="/api")
    app.include_router(accounts_router, prefix="/api")
    app.include_router(transactions_router, prefix="/api")
    app.include_router(loans_router, prefix="/api")

    return app


app = create_app()
