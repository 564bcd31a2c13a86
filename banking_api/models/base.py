"""
Database engine, session management, and base model.

The engine (and its connection pool) is created once per
process by the application lifespan and stored on
``app.state``. Every request gets a session from get_db().
"""

import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from banking_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def enforce_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite only checks foreign keys when asked to, per connection."""

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_ledger_engine(settings: Settings) -> Engine:
    """
    Build the engine that owns the ledger connection pool.

    pool_pre_ping=True tests connections before handing them
    out, so a restarted database does not fail the first
    request on each stale connection.

    The pool keeps DB_POOL_MIN connections and opens up to
    DB_POOL_MAX in total. SQLite ignores pool sizing.
    """
    url = make_url(settings.DATABASE_URL)
    options = {"pool_pre_ping": True}

    if url.get_backend_name() != "sqlite":
        options["pool_size"] = settings.DB_POOL_MIN
        options["max_overflow"] = max(
            settings.DB_POOL_MAX - settings.DB_POOL_MIN, 0
        )

    engine = create_engine(url, **options)
    if url.get_backend_name() == "sqlite":
        enforce_sqlite_foreign_keys(engine)

    logger.info(
        "Ledger engine configured",
        extra={
            "backend": url.get_backend_name(),
            "pool_min": settings.DB_POOL_MIN,
            "pool_max": settings.DB_POOL_MAX,
            "pool_increment": settings.DB_POOL_INCREMENT,
        },
    )
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Sessions never flush on their own; the gateway decides
    when to commit or roll back.
    """
    return sessionmaker(bind=engine, autoflush=False)


def get_db(request: Request):
    """
    Provide a database session for a single request.

    The session returns its connection to the pool when the
    request finishes, whether it succeeded or failed. A leaked
    connection stays occupied, and if enough leak the pool
    runs dry.
    """
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Ledger connection pool is not initialized")

    db = session_factory()
    try:
        yield db
    finally:
        db.close()
